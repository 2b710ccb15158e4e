"""
Error types for parencalc tokenizing, parsing, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parencalc.core.expression_lang.tokenizer import Token


class CalcError(Exception):
    """Base exception for all parencalc errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message

    @property
    def pos(self) -> int | None:
        """Offset into the source text the error points at, if known."""
        return None

    def with_source(self, source: str) -> CalcError:
        """Attach a source snippet so ``str(error)`` points at the offending column."""
        if self.pos is not None:
            self.context = ErrorContext(source=source, pos=self.pos)
            self.args = (self._format_message(),)
        return self


class InvalidCharacterError(CalcError):
    """
    Raised when the tokenizer meets a character outside the alphabet.

    The alphabet is ASCII digits, ``+``, ``-``, ``(``, ``)`` and whitespace.
    """

    def __init__(self, char: str, index: int):
        self.char = char
        self.index = index
        super().__init__(f"Invalid character {char!r} at index {index}")

    @property
    def pos(self) -> int:
        return self.index


class NumericOverflowError(CalcError):
    """
    Raised when a value does not fit the configured integer width.

    ``literal`` is the source text of the integer literal, or the rendered
    sub-expression whose result overflowed.
    """

    def __init__(self, literal: str, pos: int | None = None):
        self.literal = literal
        self._pos = pos
        super().__init__(f"Numeric overflow: {literal}")

    @property
    def pos(self) -> int | None:
        return self._pos


class UnexpectedTokenError(CalcError):
    """
    Raised when a token violates the grammar.

    ``token`` is None when the input ended where an operand was expected;
    ``index`` is then the length of the token sequence and ``end_pos`` the
    offset just past the last token.
    """

    def __init__(
        self,
        token: Token | None,
        index: int,
        reason: str | None = None,
        end_pos: int | None = None,
    ):
        self.token = token
        self.index = index
        self.end_pos = end_pos
        if token is None:
            message = "Unexpected end of input"
        else:
            message = f"Unexpected token {token.text!r} at token index {index}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    @property
    def pos(self) -> int | None:
        return self.token.pos if self.token is not None else self.end_pos


class UnmatchedParenthesisError(CalcError):
    """Raised when a ``(`` has no matching ``)``."""

    def __init__(self, open_index: int, token: Token):
        self.open_index = open_index
        self.token = token
        super().__init__(f"Unmatched '(' at token index {open_index}")

    @property
    def pos(self) -> int:
        return self.token.pos


class NestingTooDeepError(CalcError):
    """Raised when parentheses nest deeper than the configured limit."""

    def __init__(self, depth: int, max_depth: int, token: Token):
        self.depth = depth
        self.max_depth = max_depth
        self.token = token
        super().__init__(f"Parentheses nested {depth} deep (max {max_depth})")

    @property
    def pos(self) -> int:
        return self.token.pos


class ConfigError(CalcError):
    """Raised when a configuration file cannot be read or holds invalid values."""

    pass


@dataclass
class ErrorContext:
    """
    Source location for an error.

    Attributes:
        source: The full expression text
        pos: 0-indexed offset of the offending character
    """

    source: str
    pos: int

    @property
    def line(self) -> int:
        """1-indexed line containing ``pos``."""
        return self.source.count("\n", 0, self.pos) + 1

    @property
    def column(self) -> int:
        """1-indexed column of ``pos`` within its line."""
        return self.pos - (self.source.rfind("\n", 0, self.pos) + 1) + 1

    def format(self) -> str:
        """
        Format the offending line with a marker under the error column.

        Returns:
            Two lines: the source line and a ``^`` under the column.
        """
        text = self.source.split("\n")[self.line - 1]
        return f"  {text}\n  {' ' * (self.column - 1)}^"
