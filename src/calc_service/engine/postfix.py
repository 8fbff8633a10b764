"""
Infix to postfix conversion (shunting-yard).

Operators of equal precedence are left-associative: the operator already
on the stack is popped before the incoming one is pushed.
"""

from typing import Sequence

import structlog

from calc_service.engine.errors import ExpressionSyntaxError
from calc_service.engine.operators import precedence
from calc_service.engine.tokenizer import Token
from calc_service.models import TokenKind

logger = structlog.get_logger()


def to_postfix(tokens: Sequence[Token]) -> list[Token]:
    """
    Convert an infix token sequence to postfix order.

    Raises ExpressionSyntaxError on unmatched parentheses. Operand text
    passes through untouched.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind is TokenKind.LEFT_PAREN:
            stack.append(token)

        elif token.kind is TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind is not TokenKind.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise ExpressionSyntaxError("unmatched closing parenthesis")
            stack.pop()  # discard "("

        elif token.kind is TokenKind.OPERATOR:
            while (
                stack
                and stack[-1].kind is not TokenKind.LEFT_PAREN
                and precedence(token.text) <= precedence(stack[-1].text)
            ):
                output.append(stack.pop())
            stack.append(token)

        else:
            output.append(token)

    while stack:
        top = stack.pop()
        if top.kind is TokenKind.LEFT_PAREN:
            raise ExpressionSyntaxError("unmatched opening parenthesis")
        output.append(top)

    logger.debug("Converted to postfix", postfix=" ".join(t.text for t in output))
    return output
