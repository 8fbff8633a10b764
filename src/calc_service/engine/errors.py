"""Exceptions raised by the expression evaluator."""

from calc_service.models import ErrorKind


class EvaluationError(Exception):
    """Base exception for evaluation errors."""

    kind: ErrorKind = ErrorKind.INVALID_EXPRESSION

    def __init__(self, detail: str | None = None):
        super().__init__(self.kind.value)
        self.detail = detail

    @property
    def message(self) -> str:
        return self.kind.value


class ExpressionSyntaxError(EvaluationError):
    """Raised when the expression is structurally malformed."""
    kind = ErrorKind.SYNTAX


class DivisionByZeroError(EvaluationError):
    """Raised when attempting to divide by zero."""
    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidExpressionError(EvaluationError):
    """Raised when evaluation leaves other than one value on the stack."""
    kind = ErrorKind.INVALID_EXPRESSION
