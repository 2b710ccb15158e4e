"""
Expression evaluator for parencalc.

Pure tree-walking evaluation over the closed set of AST nodes: no I/O, no
side effects, and no use of Python's eval(). Results are checked against the
configured integer width after every operation.
"""

from __future__ import annotations

from parencalc.core.config import DEFAULT_CONFIG, CalcConfig
from parencalc.core.errors import CalcError, NumericOverflowError
from parencalc.core.expression_lang.parser import parse_expr
from parencalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal


def eval_expr(expr: Expr, config: CalcConfig | None = None) -> int:
    """Evaluate a parsed expression.

    Args:
        expr: Parsed expression AST.
        config: Interpreter settings; defaults apply when omitted.

    Returns:
        The integer value of the tree.

    Raises:
        NumericOverflowError: If a literal or an intermediate result falls
            outside the configured integer range.
    """
    return _interpret(expr, config or DEFAULT_CONFIG)


def _interpret(expr: Expr, config: CalcConfig) -> int:
    match expr:
        case Literal(value=value):
            result = value
        case BinaryExpr(op=BinaryOp.ADD, left=left, right=right):
            result = _interpret(left, config) + _interpret(right, config)
        case BinaryExpr(op=BinaryOp.SUB, left=left, right=right):
            result = _interpret(left, config) - _interpret(right, config)
        case _:
            raise TypeError(f"Unknown expression type: {type(expr).__name__}")

    if not config.in_range(result):
        raise NumericOverflowError(str(expr))
    return result


def evaluate(source: str, config: CalcConfig | None = None) -> int:
    """Tokenize, parse, and evaluate an expression string.

    Usage:
        evaluate("(13+4)-(12+1)")  # 4

    Raises:
        CalcError: The first tokenizer, parser, or evaluation error, with a
            source snippet attached.
    """
    try:
        return eval_expr(parse_expr(source, config), config)
    except CalcError as e:
        e.with_source(source)
        raise
