"""
Character cursor for the evaluator.

The scanner is the evaluator's only mutable state. It moves forward one
character at a time and never rewinds.
"""

from typing import Callable


def is_digit(ch: str) -> bool:
    """Checks if a character is a digit."""
    return ch != "" and "0" <= ch <= "9"


def is_number_part(ch: str) -> bool:
    """Checks if a character can appear in a number literal."""
    return is_digit(ch) or ch == "."


def is_whitespace(ch: str) -> bool:
    """Checks if a character is whitespace."""
    return ch in (" ", "\t", "\n", "\r")


class Scanner:
    """Forward-only cursor over an expression string."""

    def __init__(self, source: str):
        self._source = source
        self._position = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current(self) -> str:
        """The character under the cursor, or "" at end of input."""
        if self.at_end:
            return ""
        return self._source[self._position]

    def advance(self) -> str:
        ch = self.current
        if not self.at_end:
            self._position += 1
        return ch

    def skip_whitespace(self) -> None:
        while is_whitespace(self.current):
            self._position += 1

    def eat(self, expected: str) -> bool:
        """Skips whitespace, then consumes `expected` if it is next."""
        self.skip_whitespace()
        if not self.at_end and self.current == expected:
            self._position += 1
            return True
        return False

    def peek_non_whitespace(self) -> str:
        """Skips whitespace and returns the next character without consuming it."""
        self.skip_whitespace()
        return self.current

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consumes the longest run of characters matching `predicate`."""
        start = self._position
        while not self.at_end and predicate(self.current):
            self._position += 1
        return self._source[start : self._position]
