"""
Top-level expression evaluation.

Runs tokenize -> to_postfix -> evaluate_postfix in sequence. The first
error aborts the pipeline; no partial result is ever returned.
"""

import structlog

from calc_service.engine.errors import ExpressionSyntaxError
from calc_service.engine.evaluator import evaluate_postfix
from calc_service.engine.postfix import to_postfix
from calc_service.engine.tokenizer import Token, tokenize
from calc_service.models import TokenizationMode

logger = structlog.get_logger()

DEFAULT_MIN_LENGTH = 3


def prepare(
    expression: str,
    mode: TokenizationMode = TokenizationMode.NUMBER,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> list[Token]:
    """
    Tokenize an expression and apply the minimum length guard.

    CHARACTER mode measures the trimmed expression in raw characters;
    NUMBER mode measures it in tokens.
    """
    trimmed = expression.strip()

    if mode is TokenizationMode.CHARACTER and len(trimmed) < min_length:
        raise ExpressionSyntaxError("expression too short")

    tokens = tokenize(trimmed, mode)

    if mode is TokenizationMode.NUMBER and len(tokens) < min_length:
        raise ExpressionSyntaxError("expression too short")

    return tokens


def evaluate_expression(
    expression: str,
    *,
    mode: TokenizationMode | None = None,
    min_length: int | None = None,
) -> float:
    """
    Evaluate an infix arithmetic expression.

    Supports: +, -, *, /, parentheses and non-negative decimal numbers.
    Defaults for mode and min_length come from the service settings.
    Raises an EvaluationError subclass on failure.
    """
    if mode is None or min_length is None:
        from calc_service.config import settings

        mode = mode if mode is not None else settings.tokenization_mode
        min_length = min_length if min_length is not None else settings.min_expression_length

    tokens = prepare(expression, mode, min_length)
    logger.debug("Tokenized expression", mode=mode.value, tokens=[t.text for t in tokens])

    postfix = to_postfix(tokens)
    return evaluate_postfix(postfix)
