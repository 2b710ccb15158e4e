"""
parencalc expression language.

Tokenizer, parser, and evaluator for integer addition/subtraction with
nested parentheses.

Usage:
    from parencalc.core.expression_lang import evaluate, parse_expr

    expr = parse_expr("(13+4)-(12+1)")
    str(expr)  # "((13 + 4) - (12 + 1))"
    evaluate("(13+4)-(12+1)")  # 4
"""

from parencalc.core.expression_lang.evaluator import eval_expr, evaluate
from parencalc.core.expression_lang.parser import parse, parse_expr
from parencalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "Token",
    "TokenKind",
    "eval_expr",
    "evaluate",
    "parse",
    "parse_expr",
    "tokenize",
]
