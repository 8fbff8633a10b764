"""
Core data models for Calc Service.

Defines the enumerations shared by the evaluator, the configuration layer
and the API, plus the request/response schemas of the HTTP endpoint.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Enums
# =============================================================================

class TokenKind(str, Enum):
    """Classification of a single symbol unit."""
    OPERAND = "operand"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class TokenizationMode(str, Enum):
    """How an expression is split into symbol units."""
    NUMBER = "number"  # Contiguous operand runs form one token
    CHARACTER = "character"  # One token per non-whitespace character


class ErrorKind(str, Enum):
    """Closed set of evaluation failures; values are the reported messages."""
    SYNTAX = "expression is not correct"
    DIVISION_BY_ZERO = "division by zero"
    INVALID_EXPRESSION = "invalid expression"


# =============================================================================
# API Models
# =============================================================================

class CalculateRequest(BaseModel):
    """Request model for evaluating an expression."""
    expression: str = Field("", description="Infix arithmetic expression")

    @field_validator("expression", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # null is treated like a missing expression
        return "" if value is None else value


class CalculateResponse(BaseModel):
    """Successful evaluation result."""
    result: float


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""
    error: str
