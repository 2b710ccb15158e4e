"""
Tokenizer for parencalc expressions.

Converts an expression string into a list of typed tokens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum, auto

from parencalc.core.config import DEFAULT_CONFIG, CalcConfig
from parencalc.core.errors import InvalidCharacterError, NumericOverflowError

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    INTEGER = auto()
    PLUS = auto()
    MINUS = auto()
    LPAREN = auto()
    RPAREN = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer."""

    kind: TokenKind
    text: str
    pos: int
    # Parsed value, INTEGER tokens only
    value: int | None = None

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.text}"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"


def tokenize(source: str, config: CalcConfig | None = None) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Args:
        source: Expression string (e.g., "(13+4)-(12+1)")
        config: Interpreter settings; defaults apply when omitted.

    Returns:
        Tokens in source order. Empty input gives an empty list.

    Raises:
        InvalidCharacterError: On a character outside the expression alphabet.
        NumericOverflowError: If an integer literal exceeds the configured width.
    """
    config = config or DEFAULT_CONFIG
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in _WHITESPACE:
            i += 1
            continue

        # str.isdigit() also accepts non-ASCII digits
        if c in _DIGITS:
            start = i
            while i < n and source[i] in _DIGITS:
                i += 1
            text = source[start:i]
            # Length check first: int() refuses very long digit strings
            if len(text.lstrip("0")) > len(str(config.max_int)):
                raise NumericOverflowError(text, start)
            value = int(text)
            if value > config.max_int:
                raise NumericOverflowError(text, start)
            tokens.append(Token(TokenKind.INTEGER, text, start, value))
            continue

        kind = _SINGLE_CHAR.get(c)
        if kind is None:
            raise InvalidCharacterError(c, i)
        tokens.append(Token(kind, c, i))
        i += 1

    logger.debug("Tokenized %d chars into %d tokens", n, len(tokens))
    return tokens
