"""
Tests for postfix evaluation.
"""

import pytest

from calc_service.engine import (
    DivisionByZeroError,
    ExpressionSyntaxError,
    InvalidExpressionError,
    Token,
    evaluate_postfix,
    tokenize,
)
from calc_service.engine.evaluator import parse_operand
from calc_service.models import TokenKind


def rpn(expression: str) -> list[Token]:
    """Tokenize text that is already in postfix order."""
    return tokenize(expression)


class TestArithmetic:
    """Test operator application on the value stack."""

    def test_add(self):
        assert evaluate_postfix(rpn("1 2 +")) == 3

    def test_operand_order_subtract(self):
        assert evaluate_postfix(rpn("2 8 -")) == -6

    def test_operand_order_divide(self):
        assert evaluate_postfix(rpn("8 2 /")) == 4

    def test_multiply(self):
        assert evaluate_postfix(rpn("4 5 *")) == 20

    def test_divide_with_remainder(self):
        assert evaluate_postfix(rpn("7 2 /")) == 3.5

    def test_single_operand(self):
        assert evaluate_postfix(rpn("42")) == 42

    def test_result_is_float(self):
        assert isinstance(evaluate_postfix(rpn("1 1 +")), float)


class TestErrors:
    """Test failure modes of postfix evaluation."""

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            evaluate_postfix(rpn("10 0 /"))

    def test_zero_divided_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            evaluate_postfix(rpn("0 0 /"))

    def test_division_by_computed_zero(self):
        with pytest.raises(DivisionByZeroError):
            evaluate_postfix(rpn("1 2 2 - /"))

    def test_insufficient_operands(self):
        with pytest.raises(ExpressionSyntaxError):
            evaluate_postfix(rpn("1 +"))

    def test_operator_only(self):
        with pytest.raises(ExpressionSyntaxError):
            evaluate_postfix(rpn("*"))

    def test_too_many_operands(self):
        with pytest.raises(InvalidExpressionError):
            evaluate_postfix(rpn("1 2"))

    def test_empty(self):
        with pytest.raises(InvalidExpressionError):
            evaluate_postfix([])

    def test_parenthesis_token(self):
        with pytest.raises(ExpressionSyntaxError):
            evaluate_postfix([Token(TokenKind.LEFT_PAREN, "(")])

    def test_unparseable_operand(self):
        with pytest.raises(ExpressionSyntaxError):
            evaluate_postfix(rpn("abc 1 +"))


class TestParseOperand:
    """Test numeric parsing of operand text."""

    @pytest.mark.parametrize("text,expected", [
        ("0", 0.0),
        ("12", 12.0),
        ("1.5", 1.5),
        (".5", 0.5),
        ("3.", 3.0),
    ])
    def test_decimal_literals(self, text, expected):
        assert parse_operand(text) == expected

    @pytest.mark.parametrize("text", [
        "abc", "1..2", ".", "1e5", "inf", "nan", "1_000", "+1", "-1", "",
    ])
    def test_rejected(self, text):
        with pytest.raises(ExpressionSyntaxError):
            parse_operand(text)


class TestRange:
    """Test that values outside the float range are rejected."""

    def test_operand_too_large(self):
        with pytest.raises(ExpressionSyntaxError):
            parse_operand("9" * 400)

    def test_large_finite_operand(self):
        assert parse_operand("9" * 300) == float("9" * 300)

    def test_overflowing_operand_in_expression(self):
        with pytest.raises(ExpressionSyntaxError):
            evaluate_postfix(rpn("9" * 400 + " 1 +"))

    def test_multiplication_overflow(self):
        big = "9" * 300
        with pytest.raises(ExpressionSyntaxError):
            evaluate_postfix(rpn(f"{big} {big} *"))

    def test_division_overflow(self):
        with pytest.raises(ExpressionSyntaxError):
            evaluate_postfix(rpn(f"{'9' * 308} .001 /"))
