"""
Calc Service expression engine.

This package contains the tokenizer, the shunting-yard converter and the
postfix evaluator that make up the evaluation pipeline.
"""

from calc_service.engine.calculator import evaluate_expression
from calc_service.engine.errors import (
    DivisionByZeroError,
    EvaluationError,
    ExpressionSyntaxError,
    InvalidExpressionError,
)
from calc_service.engine.evaluator import evaluate_postfix
from calc_service.engine.postfix import to_postfix
from calc_service.engine.tokenizer import Token, classify, tokenize

__all__ = [
    "evaluate_expression",
    "evaluate_postfix",
    "to_postfix",
    "tokenize",
    "classify",
    "Token",
    "EvaluationError",
    "ExpressionSyntaxError",
    "DivisionByZeroError",
    "InvalidExpressionError",
]
