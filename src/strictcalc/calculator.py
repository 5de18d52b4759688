"""
Calculator front end for the evaluator.

Turns display text into canonical expression syntax, evaluates it, and
reports either a formatted value or the classified error as a result
object. Expression errors never escape calculate().
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import DivisionByZeroError, ErrorKind, ExpressionError
from .evaluator import evaluate
from .limits import ExpressionLimits

logger = logging.getLogger(__name__)

# Operator glyphs a keypad or user may type, mapped to canonical operators
OPERATOR_GLYPHS: Dict[str, str] = {
    "x": "*",
    "X": "*",
    "×": "*",  # multiplication sign
    "÷": "/",  # division sign
    "−": "-",  # minus sign
}

# Fractional digits shown for non-integer results
DISPLAY_PRECISION = 6


@dataclass
class CalculationResult:
    """Result of a calculation."""

    value: Optional[float]
    """The computed value, None if the calculation failed."""

    display: str
    """Text to show: the formatted value, or the error message."""

    success: bool
    """Whether the calculation succeeded."""

    error: Optional[str] = None
    """Error message if the calculation failed."""

    kind: Optional[ErrorKind] = None
    """Error classification if the calculation failed."""

    position: Optional[int] = None
    """Offending position in the normalized expression, if known."""


def normalize_expression(text: str) -> str:
    """Replaces alternate operator glyphs with canonical operators."""
    return "".join(OPERATOR_GLYPHS.get(ch, ch) for ch in text)


def format_result(value: float) -> str:
    """
    Formats a value for display.

    Integer values print without a fractional part; anything else is
    rounded to DISPLAY_PRECISION digits with trailing zeros removed.
    """
    if value.is_integer():
        text = str(int(value))
    else:
        text = f"{value:.{DISPLAY_PRECISION}f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def check_finite(value: float, expression: str) -> float:
    """Rejects results that are infinite or not a number."""
    if not math.isfinite(value):
        raise DivisionByZeroError(None, expression)
    return value


def calculate(
    text: str, limits: Optional[ExpressionLimits] = None
) -> CalculationResult:
    """
    Normalizes and evaluates calculator input.

    Args:
        text: The expression as typed, possibly using glyphs such as 'x' or '÷'
        limits: Optional expression limits

    Returns:
        The calculation result with value and display text, or the error
    """
    expression = normalize_expression(text)
    try:
        value = check_finite(evaluate(expression, limits), expression)
    except ExpressionError as error:
        logger.debug(
            "calculation_failed",
            extra={"expression": expression, "kind": error.kind.value},
        )
        return CalculationResult(
            value=None,
            display=error.message,
            success=False,
            error=error.message,
            kind=error.kind,
            position=error.position,
        )

    return CalculationResult(value=value, display=format_result(value), success=True)
