"""
Tests for infix to postfix conversion.
"""

import pytest

from calc_service.engine import ExpressionSyntaxError, to_postfix, tokenize


def postfix_of(expression: str) -> list[str]:
    return [t.text for t in to_postfix(tokenize(expression))]


class TestPrecedence:
    """Test operator ordering in the output queue."""

    def test_single_operator(self):
        assert postfix_of("1+1") == ["1", "1", "+"]

    def test_multiplication_binds_tighter(self):
        assert postfix_of("3+4*2") == ["3", "4", "2", "*", "+"]

    def test_higher_precedence_first(self):
        assert postfix_of("2*3-4") == ["2", "3", "*", "4", "-"]

    def test_equal_precedence_is_left_associative(self):
        assert postfix_of("8-4-2") == ["8", "4", "-", "2", "-"]
        assert postfix_of("8/4*2") == ["8", "4", "/", "2", "*"]

    def test_mixed(self):
        assert postfix_of("7+3*2-4/2") == ["7", "3", "2", "*", "+", "4", "2", "/", "-"]


class TestParentheses:
    """Test grouping and parenthesis matching."""

    def test_parentheses_override_precedence(self):
        assert postfix_of("(2+3)*4") == ["2", "3", "+", "4", "*"]

    def test_parentheses_are_discarded(self):
        assert postfix_of("((1))") == ["1"]

    def test_nested(self):
        assert postfix_of("((10+5)*2)/3") == ["10", "5", "+", "2", "*", "3", "/"]

    def test_deep_nesting(self):
        expression = "(" * 500 + "1+2" + ")" * 500
        assert postfix_of(expression) == ["1", "2", "+"]

    @pytest.mark.parametrize("expression", ["(1+2", "((1+2)", "(", "1+(2*3"])
    def test_unmatched_opening(self, expression):
        with pytest.raises(ExpressionSyntaxError):
            to_postfix(tokenize(expression))

    @pytest.mark.parametrize("expression", ["1+2)", ")", ")1+2(", "(1))"])
    def test_unmatched_closing(self, expression):
        with pytest.raises(ExpressionSyntaxError):
            to_postfix(tokenize(expression))


class TestOperands:
    def test_operand_text_passes_through(self):
        assert postfix_of("a+b") == ["a", "b", "+"]

    def test_empty(self):
        assert to_postfix([]) == []

    def test_operator_without_operands_is_not_rejected_here(self):
        assert postfix_of("1+") == ["1", "+"]
