"""
Arithmetic expression evaluator.

Parses and evaluates an infix expression in a single pass. Each grammar
production returns its computed value; no syntax tree is built.

Grammar (whitespace allowed between tokens):

    Expression := Term (('+' | '-') Term)*
    Term       := Factor (('*' | '/' | '%') Factor)*
    Factor     := '-' Factor | '(' Expression ')' | Number
    Number     := digit+ ('.' digit*)? | '.' digit+

Precedence (lowest to highest):
1. Additive: +, -
2. Multiplicative: *, /, %
3. Unary: -
4. Primary: numbers, parentheses

A leading unary '+' is always rejected. Modulo only accepts integer-valued
operands and may not be chained without parentheses.
"""

import logging
import math
from typing import Optional

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
from .limits import (
    DEFAULT_EXPRESSION_LIMITS,
    ExpressionLimits,
    check_expression_length,
    check_nesting_depth,
)
from .scanner import Scanner, is_number_part

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates one expression string."""

    def __init__(
        self,
        source: str,
        limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS,
    ):
        self._source = source
        self._limits = limits
        self._scanner = Scanner(source)
        self._depth = 0
        self._deepest = 0

    def evaluate(self) -> float:
        """Evaluates the whole source and returns its value."""
        check_expression_length(self._source, self._limits)

        # Each call scans from the start
        self._scanner = Scanner(self._source)
        self._depth = 0
        self._deepest = 0

        try:
            value = self._parse_expression()
        except RecursionError:
            # The interpreter stack ran out before max_nesting_depth was reached
            raise LimitExceededError(
                ErrorKind.NESTING_TOO_DEEP,
                "nesting depth",
                self._limits.max_nesting_depth,
                self._deepest,
                self._scanner.position,
                self._source,
            ) from None

        self._scanner.skip_whitespace()
        if not self._scanner.at_end:
            raise UnexpectedTokenError(
                self._scanner.current, self._scanner.position, self._source
            )

        return value

    # ============================================================
    # Productions (by precedence, lowest to highest)
    # ============================================================

    def _parse_expression(self) -> float:
        """Parses additive: +, -"""
        value = self._parse_term()

        while True:
            if self._scanner.eat("+"):
                value += self._parse_term()
            elif self._scanner.eat("-"):
                value -= self._parse_term()
            else:
                return value

    def _parse_term(self) -> float:
        """Parses multiplicative: *, /, %"""
        value = self._parse_factor()

        while True:
            if self._scanner.eat("*"):
                value *= self._parse_factor()
            elif self._scanner.eat("/"):
                position = self._scanner.position - 1
                divisor = self._parse_factor()
                if divisor == 0:
                    raise DivisionByZeroError(position, self._source)
                value /= divisor
            elif self._scanner.eat("%"):
                position = self._scanner.position - 1
                divisor = self._parse_factor()
                value = self._modulo(value, divisor, position)

                if self._scanner.peek_non_whitespace() == "%":
                    raise AmbiguousModuloError(self._scanner.position, self._source)
            else:
                return value

    def _modulo(self, dividend: float, divisor: float, position: int) -> float:
        if not dividend.is_integer() or not divisor.is_integer():
            raise IntegerModuloError(position, self._source)
        if divisor == 0:
            raise DivisionByZeroError(position, self._source)
        # Truncating remainder: the result takes the sign of the dividend
        return math.fmod(dividend, divisor)

    def _parse_factor(self) -> float:
        """Parses unary minus, parentheses and number literals."""
        scanner = self._scanner

        if scanner.eat("+"):
            raise UnexpectedTokenError("+", scanner.position - 1, self._source)

        if scanner.eat("-"):
            self._enter(scanner.position - 1)
            try:
                return -self._parse_factor()
            finally:
                self._depth -= 1

        if scanner.eat("("):
            self._enter(scanner.position - 1)
            try:
                value = self._parse_expression()
                if not scanner.eat(")"):
                    raise UnmatchedParenthesisError(scanner.position, self._source)
                return value
            finally:
                self._depth -= 1

        if is_number_part(scanner.current):
            return self._parse_number()

        if scanner.at_end:
            raise IncompleteInputError(scanner.position, self._source)
        raise UnexpectedTokenError(scanner.current, scanner.position, self._source)

    def _parse_number(self) -> float:
        start = self._scanner.position
        text = self._scanner.take_while(is_number_part)

        if text == "." or text.count(".") > 1:
            raise InvalidNumberError(text, start, self._source)

        return float(text)

    def _enter(self, position: int) -> None:
        self._depth += 1
        self._deepest = max(self._deepest, self._depth)
        check_nesting_depth(self._depth, position, self._source, self._limits)


def evaluate(source: str, limits: Optional[ExpressionLimits] = None) -> float:
    """
    Evaluates an arithmetic expression string.

    Args:
        source: The expression, using the canonical operators + - * / %
        limits: Optional expression limits

    Returns:
        The computed value

    Raises:
        ExpressionError: A subclass identifying why the expression was rejected
    """
    evaluator = Evaluator(source, limits or DEFAULT_EXPRESSION_LIMITS)
    try:
        return evaluator.evaluate()
    except ExpressionError as error:
        logger.debug(
            "expression_rejected",
            extra={"expression": source, "error": str(error)},
        )
        raise
