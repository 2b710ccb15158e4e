"""Tests for parencalc error types and source snippets."""

from __future__ import annotations

import pytest

from parencalc.core.errors import (
    CalcError,
    ConfigError,
    ErrorContext,
    InvalidCharacterError,
    NestingTooDeepError,
    NumericOverflowError,
    UnexpectedTokenError,
    UnmatchedParenthesisError,
)
from parencalc.core.expression_lang.tokenizer import Token, TokenKind


class TestErrorContext:
    def test_single_line(self) -> None:
        ctx = ErrorContext(source="1+a", pos=2)
        assert (ctx.line, ctx.column) == (1, 3)
        assert ctx.format() == "  1+a\n    ^"

    def test_second_line(self) -> None:
        ctx = ErrorContext(source="1+\n2+x", pos=5)
        assert (ctx.line, ctx.column) == (2, 3)
        assert ctx.format() == "  2+x\n    ^"

    def test_end_of_input(self) -> None:
        ctx = ErrorContext(source="1+", pos=2)
        assert ctx.format() == "  1+\n    ^"


class TestErrorTypes:
    @pytest.mark.parametrize(
        "error_cls",
        [
            InvalidCharacterError,
            NumericOverflowError,
            UnexpectedTokenError,
            UnmatchedParenthesisError,
            NestingTooDeepError,
            ConfigError,
        ],
    )
    def test_all_derive_from_calc_error(self, error_cls: type[Exception]) -> None:
        assert issubclass(error_cls, CalcError)

    def test_unexpected_token_message(self) -> None:
        token = Token(TokenKind.RPAREN, ")", 4)
        error = UnexpectedTokenError(token, 3, "no matching '('")
        assert error.message == "Unexpected token ')' at token index 3: no matching '('"
        assert error.pos == 4

    def test_unexpected_end_of_input(self) -> None:
        error = UnexpectedTokenError(None, 2, end_pos=2)
        assert error.message == "Unexpected end of input"
        assert error.pos == 2

    def test_unmatched_parenthesis_points_at_open(self) -> None:
        error = UnmatchedParenthesisError(1, Token(TokenKind.LPAREN, "(", 2))
        assert error.open_index == 1
        assert error.pos == 2

    def test_overflow_without_position(self) -> None:
        error = NumericOverflowError("(2147483647 + 1)")
        assert error.pos is None
        assert str(error) == "Numeric overflow: (2147483647 + 1)"

    def test_with_source_adds_snippet(self) -> None:
        error = InvalidCharacterError("x", 1).with_source("1x")
        assert error.context == ErrorContext(source="1x", pos=1)
        assert str(error) == "Invalid character 'x' at index 1\n  1x\n   ^"

    def test_with_source_without_position(self) -> None:
        error = UnexpectedTokenError(None, 0).with_source("")
        assert error.context is None
        assert str(error) == "Unexpected end of input"
