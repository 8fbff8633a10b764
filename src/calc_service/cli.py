"""
Command-line interface for Calc Service.

Provides commands for:
- Running the API server
- Evaluating expressions locally
- Inspecting tokenization and postfix conversion
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calc_service.models import TokenizationMode

app = typer.Typer(
    name="calc",
    help="Calc Service - Arithmetic Expression Evaluation Service",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override CALC_LOG_LEVEL"),
):
    """Calc Service command-line tools."""
    from calc_service.config import settings
    from calc_service.log import configure_logging

    configure_logging(log_level or settings.log_level)


# =============================================================================
# Server Commands
# =============================================================================

@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Number of workers"),
):
    """Start the Calc Service API server."""
    import uvicorn

    from calc_service.config import settings

    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold green]Starting Calc Service server on {host}:{port}[/]")

    uvicorn.run(
        "calc_service.api:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers or settings.workers,
    )


# =============================================================================
# Evaluation Commands
# =============================================================================

@app.command("eval")
def eval_expression(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
    mode: Optional[TokenizationMode] = typer.Option(
        None, "--mode", "-m", help="Tokenization mode (defaults to settings)"
    ),
):
    """Evaluate an expression and print the result."""
    from calc_service.engine import EvaluationError, evaluate_expression

    try:
        result = evaluate_expression(expression, mode=mode)
    except EvaluationError as e:
        console.print(f"[red]✗ {e.message}[/]")
        if e.detail:
            console.print(f"  [dim]{escape(e.detail)}[/]")
        raise typer.Exit(1)

    console.print(f"[green]{_format_number(result)}[/]")


@app.command()
def postfix(
    expression: str = typer.Argument(..., help="Expression to convert"),
    mode: Optional[TokenizationMode] = typer.Option(
        None, "--mode", "-m", help="Tokenization mode (defaults to settings)"
    ),
):
    """Show the tokens and postfix form of an expression."""
    from calc_service.config import settings
    from calc_service.engine import EvaluationError, to_postfix
    from calc_service.engine.calculator import prepare

    mode = mode or settings.tokenization_mode

    try:
        tokens = prepare(expression, mode, settings.min_expression_length)
        converted = to_postfix(tokens)
    except EvaluationError as e:
        console.print(f"[red]✗ {e.message}[/]")
        if e.detail:
            console.print(f"  [dim]{escape(e.detail)}[/]")
        raise typer.Exit(1)

    table = Table(title=f"Tokens ({mode.value} mode)")
    table.add_column("#", style="dim")
    table.add_column("Text", style="cyan")
    table.add_column("Kind", style="magenta")

    for i, token in enumerate(tokens, start=1):
        table.add_row(str(i), escape(token.text), token.kind.value)

    console.print(table)
    console.print(f"\n[bold]Postfix:[/] {escape(' '.join(t.text for t in converted))}")


# =============================================================================
# Config Commands
# =============================================================================

@app.command()
def config():
    """Show effective settings."""
    from calc_service.config import settings

    table = Table(title="Settings")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")

    for name, value in settings.model_dump().items():
        table.add_row(name, str(getattr(value, "value", value)))

    console.print(table)


# =============================================================================
# Helpers
# =============================================================================

def _format_number(value: float) -> str:
    """Render whole floats without a trailing .0."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


if __name__ == "__main__":
    app()
