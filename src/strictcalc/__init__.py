"""
Strict arithmetic expression evaluator.

This module provides a single-pass, side-effect-free evaluator for infix
arithmetic with a classified error for every rejected input.
"""

# Calculator front end
from .calculator import (
    CalculationResult,
    calculate,
    format_result,
    normalize_expression,
)
from .errors import (
    AmbiguousModuloError,
    DivisionByZeroError,
    ErrorKind,
    ExpressionError,
    IncompleteInputError,
    IntegerModuloError,
    InvalidNumberError,
    LimitExceededError,
    UnexpectedTokenError,
    UnmatchedParenthesisError,
)

# Evaluator
from .evaluator import (
    Evaluator,
    evaluate,
)
from .limits import (
    DEFAULT_EXPRESSION_LIMITS,
    ExpressionLimits,
    limits_from_env,
)
from .scanner import Scanner

__all__ = [
    # Errors
    "ErrorKind",
    "ExpressionError",
    "IncompleteInputError",
    "InvalidNumberError",
    "DivisionByZeroError",
    "IntegerModuloError",
    "AmbiguousModuloError",
    "UnmatchedParenthesisError",
    "UnexpectedTokenError",
    "LimitExceededError",
    # Limits
    "ExpressionLimits",
    "DEFAULT_EXPRESSION_LIMITS",
    "limits_from_env",
    # Scanner
    "Scanner",
    # Evaluator
    "Evaluator",
    "evaluate",
    # Calculator
    "CalculationResult",
    "calculate",
    "format_result",
    "normalize_expression",
]
