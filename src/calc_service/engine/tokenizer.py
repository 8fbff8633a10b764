"""
Tokenizer and symbol classifier.

Splits raw expression text into symbol units and classifies each one.
Operand text is not validated here; numeric parsing happens during
postfix evaluation.
"""

from dataclasses import dataclass

from calc_service.engine.operators import LEFT_PAREN, RIGHT_PAREN, is_operator
from calc_service.models import TokenKind, TokenizationMode


@dataclass(frozen=True)
class Token:
    """A classified symbol unit."""
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return self.text


def classify(symbol: str) -> TokenKind:
    """Classify a symbol as operator, parenthesis or operand text."""
    if is_operator(symbol):
        return TokenKind.OPERATOR
    if symbol == LEFT_PAREN:
        return TokenKind.LEFT_PAREN
    if symbol == RIGHT_PAREN:
        return TokenKind.RIGHT_PAREN
    return TokenKind.OPERAND


def _is_delimiter(char: str) -> bool:
    return classify(char) is not TokenKind.OPERAND


def tokenize(
    expression: str,
    mode: TokenizationMode = TokenizationMode.NUMBER,
) -> list[Token]:
    """
    Split an expression into classified tokens.

    In CHARACTER mode every non-whitespace character is its own token, so
    "12" yields the operands "1" and "2". In NUMBER mode operators and
    parentheses are single tokens and every maximal run of other
    non-whitespace characters is one operand; whitespace also ends a run.
    """
    if mode is TokenizationMode.CHARACTER:
        return [Token(classify(c), c) for c in expression if not c.isspace()]

    tokens: list[Token] = []
    run: list[str] = []

    def flush() -> None:
        if run:
            tokens.append(Token(TokenKind.OPERAND, "".join(run)))
            run.clear()

    for char in expression:
        if char.isspace():
            # Whitespace separates operands: "1 2" is two tokens, not "12"
            flush()
        elif _is_delimiter(char):
            flush()
            tokens.append(Token(classify(char), char))
        else:
            run.append(char)
    flush()

    return tokens
