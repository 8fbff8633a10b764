"""Postfix evaluation on a value stack."""

import math
import re
from typing import Sequence

from calc_service.engine.errors import (
    DivisionByZeroError,
    ExpressionSyntaxError,
    InvalidExpressionError,
)
from calc_service.engine.operators import OPERATORS
from calc_service.engine.tokenizer import Token
from calc_service.models import TokenKind

# Plain decimal literals only: no sign, exponent, underscores, inf or nan
_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def parse_operand(text: str) -> float:
    """Parse operand text as a float, rejecting anything but a decimal literal."""
    if not _NUMBER_RE.fullmatch(text):
        raise ExpressionSyntaxError(f"not a number: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ExpressionSyntaxError(f"number out of range: {text[:20]}...")
    return value


def evaluate_postfix(postfix: Sequence[Token]) -> float:
    """
    Reduce a postfix token sequence to a single value.

    Raises:
        ExpressionSyntaxError: operand text is not a number, an operator
            has fewer than two values available, or a number or intermediate
            result does not fit in a float.
        DivisionByZeroError: the divisor is exactly zero.
        InvalidExpressionError: the stack does not end with exactly one value.
    """
    stack: list[float] = []

    for token in postfix:
        if token.kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise ExpressionSyntaxError(f"missing operand for {token.text!r}")
            b = stack.pop()
            a = stack.pop()
            if token.text == "/" and b == 0:
                raise DivisionByZeroError()
            result = OPERATORS[token.text].apply(a, b)
            if not math.isfinite(result):
                raise ExpressionSyntaxError(f"result of {token.text!r} out of range")
            stack.append(result)
        elif token.kind is TokenKind.OPERAND:
            stack.append(parse_operand(token.text))
        else:
            # Parentheses never survive conversion
            raise ExpressionSyntaxError(f"unexpected token {token.text!r}")

    if len(stack) != 1:
        raise InvalidExpressionError(f"{len(stack)} values left on stack")

    return stack[0]
