"""
Resource limits for expression evaluation.

These limits keep recursion bounded for untrusted input: the evaluator
recurses once per parenthesis and per unary minus, so both the input
length and the nesting depth are capped.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ErrorKind, LimitExceededError

ENV_VAR_MAX_EXPRESSION_LENGTH = "STRICTCALC_MAX_EXPRESSION_LENGTH"
ENV_VAR_MAX_NESTING_DEPTH = "STRICTCALC_MAX_NESTING_DEPTH"


@dataclass(frozen=True)
class ExpressionLimits:
    """Expression limits configuration."""

    # Maximum expression string length in characters
    max_expression_length: int = 4096

    # Maximum number of nested parentheses and unary minus signs
    max_nesting_depth: int = 100


# Default expression limits.
#
# Each nesting level costs three interpreter frames, so the default depth
# stays well below the interpreter's recursion limit.
DEFAULT_EXPRESSION_LIMITS = ExpressionLimits()


def _read_positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def limits_from_env(env: Optional[Mapping[str, str]] = None) -> ExpressionLimits:
    """
    Builds limits from environment variables.

    Args:
        env: Mapping to read from, defaults to os.environ

    Returns:
        Limits with unset variables falling back to the defaults

    Raises:
        ValueError: If a variable is set to a non-integer or non-positive value
    """
    env = os.environ if env is None else env
    return ExpressionLimits(
        max_expression_length=_read_positive_int(
            env,
            ENV_VAR_MAX_EXPRESSION_LENGTH,
            DEFAULT_EXPRESSION_LIMITS.max_expression_length,
        ),
        max_nesting_depth=_read_positive_int(
            env,
            ENV_VAR_MAX_NESTING_DEPTH,
            DEFAULT_EXPRESSION_LIMITS.max_nesting_depth,
        ),
    )


def check_expression_length(
    expression: str, limits: Optional[ExpressionLimits] = None
) -> None:
    """Validates that expression length is within limits."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if len(expression) > limits.max_expression_length:
        raise LimitExceededError(
            ErrorKind.EXPRESSION_TOO_LONG,
            "expression length",
            limits.max_expression_length,
            len(expression),
        )


def check_nesting_depth(
    depth: int,
    position: int,
    expression: str,
    limits: Optional[ExpressionLimits] = None,
) -> None:
    """Validates nesting depth during evaluation."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if depth > limits.max_nesting_depth:
        raise LimitExceededError(
            ErrorKind.NESTING_TOO_DEEP,
            "nesting depth",
            limits.max_nesting_depth,
            depth,
            position,
            expression,
        )
