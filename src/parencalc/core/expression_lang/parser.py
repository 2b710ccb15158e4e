"""
Recursive descent parser for parencalc expressions.

The grammar is flat: there is no precedence, and each parenthesis level
holds at most one binary operation.

    expr     → operand (("+" | "-") operand)?
    operand  → INTEGER | "(" expr ")"

A level is parsed by scanning its token range left to right into a
builder with two operand slots and one pending operator. A "(" is matched
to its ")" by counting nesting depth, and the tokens strictly between them
are parsed recursively as a new level.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from parencalc.core.config import DEFAULT_CONFIG, CalcConfig
from parencalc.core.errors import (
    NestingTooDeepError,
    UnexpectedTokenError,
    UnmatchedParenthesisError,
)
from parencalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from parencalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal

logger = logging.getLogger(__name__)

_OPERATORS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}


@dataclass
class _PendingBinary:
    """Partially built binary operation for one nesting level."""

    left: Expr | None = None
    op: BinaryOp | None = None
    right: Expr | None = None

    def fill(self, operand: Expr) -> None:
        if self.left is None:
            self.left = operand
        else:
            self.right = operand


class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, tokens: Sequence[Token], config: CalcConfig) -> None:
        self.tokens = tokens
        self.config = config

    def parse(self) -> Expr:
        return self.parse_range(0, len(self.tokens), depth=0)

    def parse_range(self, start: int, end: int, depth: int) -> Expr:
        """Parse ``tokens[start:end]`` as one level."""
        pending = _PendingBinary()
        i = start

        while i < end:
            tok = self.tokens[i]

            match tok.kind:
                case TokenKind.INTEGER:
                    self._check_operand_slot(pending, tok, i)
                    if tok.value is None:
                        raise UnexpectedTokenError(tok, i, "integer token without a value")
                    pending.fill(Literal(value=tok.value))
                    i += 1
                case TokenKind.PLUS | TokenKind.MINUS:
                    self._set_operator(pending, _OPERATORS[tok.kind], tok, i)
                    i += 1
                case TokenKind.LPAREN:
                    self._check_operand_slot(pending, tok, i)
                    if depth + 1 > self.config.max_depth:
                        raise NestingTooDeepError(depth + 1, self.config.max_depth, tok)
                    close = self._find_matching(i, end)
                    pending.fill(self.parse_range(i + 1, close, depth + 1))
                    i = close + 1
                case TokenKind.RPAREN:
                    raise UnexpectedTokenError(tok, i, "no matching '('")

        return self._finish(pending, end)

    def _find_matching(self, open_index: int, end: int) -> int:
        """Index of the ")" closing the "(" at *open_index*, searching before *end*."""
        depth = 0
        for j in range(open_index, end):
            kind = self.tokens[j].kind
            if kind == TokenKind.LPAREN:
                depth += 1
            elif kind == TokenKind.RPAREN:
                depth -= 1
                if depth == 0:
                    return j
        raise UnmatchedParenthesisError(open_index, self.tokens[open_index])

    def _check_operand_slot(self, pending: _PendingBinary, tok: Token, index: int) -> None:
        if pending.left is None:
            return
        if pending.op is None:
            raise UnexpectedTokenError(tok, index, "expected an operator")
        if pending.right is not None:
            raise UnexpectedTokenError(tok, index, "no free operand slot")

    def _set_operator(
        self, pending: _PendingBinary, op: BinaryOp, tok: Token, index: int
    ) -> None:
        if self.config.lenient_operators:
            if pending.op is not None:
                logger.debug("Operator %s overwritten by %s at token %d", pending.op, op, index)
            pending.op = op
            return

        if pending.left is None:
            raise UnexpectedTokenError(tok, index, "missing left operand")
        if pending.right is not None:
            raise UnexpectedTokenError(tok, index, "binary operation already complete")
        if pending.op is not None:
            raise UnexpectedTokenError(tok, index, "operator already pending")
        pending.op = op

    def _finish(self, pending: _PendingBinary, end: int) -> Expr:
        """Turn the builder into a complete node, or report what is missing."""
        if pending.left is not None and pending.op is None:
            return pending.left

        if pending.left is None:
            reason = "missing operand"
        elif pending.right is None:
            reason = "missing right operand"
        else:
            assert pending.op is not None
            return BinaryExpr(op=pending.op, left=pending.left, right=pending.right)

        if end < len(self.tokens):
            raise UnexpectedTokenError(self.tokens[end], end, reason)
        raise UnexpectedTokenError(None, end, reason, end_pos=self._end_pos())

    def _end_pos(self) -> int:
        if not self.tokens:
            return 0
        last = self.tokens[-1]
        return last.pos + len(last.text)


def parse(tokens: Sequence[Token], config: CalcConfig | None = None) -> Expr:
    """Parse a token list into an AST.

    Args:
        tokens: Tokens from :func:`tokenize`.
        config: Interpreter settings; defaults apply when omitted.

    Returns:
        A Literal, or a BinaryExpr with both operands set.

    Raises:
        UnexpectedTokenError: If a token violates the grammar, or an operand is missing.
        UnmatchedParenthesisError: If a "(" is never closed.
        NestingTooDeepError: If parentheses nest deeper than ``config.max_depth``.
    """
    expr = _Parser(tokens, config or DEFAULT_CONFIG).parse()
    logger.debug("Parsed %d tokens into %s", len(tokens), type(expr).__name__)
    return expr


def parse_expr(source: str, config: CalcConfig | None = None) -> Expr:
    """Tokenize and parse an expression string.

    Args:
        source: Expression string (e.g., "(13+4)-(12+1)")
        config: Interpreter settings; defaults apply when omitted.

    Returns:
        Parsed expression AST.

    Raises:
        CalcError: Any tokenizer or parser error.
    """
    return parse(tokenize(source, config), config)
