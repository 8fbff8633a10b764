"""
Operator table for the evaluator.

The table is built once at import time and exposed read-only; every
symbol the tokenizer classifies as an operator is a key here.
"""

import operator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping


@dataclass(frozen=True)
class Operator:
    """A binary infix operator."""
    symbol: str
    precedence: int  # Higher binds tighter
    apply: Callable[[float, float], float]


OPERATORS: Mapping[str, Operator] = MappingProxyType({
    "+": Operator("+", 1, operator.add),
    "-": Operator("-", 1, operator.sub),
    "*": Operator("*", 2, operator.mul),
    "/": Operator("/", 2, operator.truediv),
})

LEFT_PAREN = "("
RIGHT_PAREN = ")"


def is_operator(symbol: str) -> bool:
    return symbol in OPERATORS


def precedence(symbol: str) -> int:
    """Return the precedence rank of an operator symbol."""
    return OPERATORS[symbol].precedence
