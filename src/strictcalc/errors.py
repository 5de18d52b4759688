"""
Error types for the arithmetic evaluator.

All evaluator errors extend ExpressionError and carry an ErrorKind so
callers can tell failures apart without matching on message text.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Classification of a rejected expression."""

    INCOMPLETE_INPUT = "incomplete_input"
    INVALID_NUMBER = "invalid_number"
    DIVISION_BY_ZERO = "division_by_zero"
    INTEGER_MODULO_ONLY = "integer_modulo_only"
    AMBIGUOUS_MODULO = "ambiguous_modulo"
    UNMATCHED_PARENTHESIS = "unmatched_parenthesis"
    UNEXPECTED_TOKEN = "unexpected_token"
    EXPRESSION_TOO_LONG = "expression_too_long"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ExpressionError(Exception):
    """
    Base error class for all expression-related errors.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.expression = expression

    def format_with_context(self) -> str:
        """
        Returns a formatted error message with position context.
        """
        if self.expression is None or self.position is None:
            return self.message

        pointer = " " * self.position + "^"
        return f"{self.message}\n  {self.expression}\n  {pointer}"


class IncompleteInputError(ExpressionError):
    """
    An operand was expected but the input ended.
    """

    kind = ErrorKind.INCOMPLETE_INPUT

    def __init__(self, position: Optional[int] = None, expression: Optional[str] = None):
        super().__init__("Incomplete", position, expression)


class InvalidNumberError(ExpressionError):
    """
    A number literal could not be read as a float.
    """

    kind = ErrorKind.INVALID_NUMBER

    def __init__(
        self,
        text: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(f"Invalid Number: {text}", position, expression)
        self.text = text


class DivisionByZeroError(ExpressionError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, position: Optional[int] = None, expression: Optional[str] = None):
        super().__init__("Div by Zero", position, expression)


class IntegerModuloError(ExpressionError):
    """
    An operand of '%' has a fractional part.
    """

    kind = ErrorKind.INTEGER_MODULO_ONLY

    def __init__(self, position: Optional[int] = None, expression: Optional[str] = None):
        super().__init__("Int Mod Only", position, expression)


class AmbiguousModuloError(ExpressionError):
    """
    Two '%' operations were chained at one level without parentheses.
    """

    kind = ErrorKind.AMBIGUOUS_MODULO

    def __init__(self, position: Optional[int] = None, expression: Optional[str] = None):
        super().__init__(
            "Ambiguous: chained '%' needs parentheses", position, expression
        )


class UnmatchedParenthesisError(ExpressionError):
    kind = ErrorKind.UNMATCHED_PARENTHESIS

    def __init__(self, position: Optional[int] = None, expression: Optional[str] = None):
        super().__init__("Missing ')'", position, expression)


class UnexpectedTokenError(ExpressionError):
    """
    A character that cannot appear at this point of the expression.
    """

    kind = ErrorKind.UNEXPECTED_TOKEN

    def __init__(
        self,
        token: str,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        super().__init__(f"Unexpected: {token}", position, expression)
        self.token = token


class LimitExceededError(ExpressionError):
    """
    Error thrown when expression limits are exceeded.
    """

    def __init__(
        self,
        kind: ErrorKind,
        limit_name: str,
        limit: int,
        actual: int,
        position: Optional[int] = None,
        expression: Optional[str] = None,
    ):
        message = f"Limit exceeded: {limit_name} (limit: {limit}, actual: {actual})"
        super().__init__(message, position, expression)
        self.kind = kind
        self.limit_name = limit_name
        self.limit = limit
        self.actual = actual
