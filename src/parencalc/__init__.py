"""
parencalc - integer addition/subtraction interpreter with nested parentheses.

    >>> from parencalc import evaluate
    >>> evaluate("(13+4)-(12+1)")
    4
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.config import CalcConfig, load_config
from .core.errors import (
    CalcError,
    InvalidCharacterError,
    NestingTooDeepError,
    NumericOverflowError,
    UnexpectedTokenError,
    UnmatchedParenthesisError,
)
from .core.expression_lang import eval_expr, evaluate, parse, parse_expr, tokenize

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "CalcConfig",
    "load_config",
    "CalcError",
    "InvalidCharacterError",
    "NestingTooDeepError",
    "NumericOverflowError",
    "UnexpectedTokenError",
    "UnmatchedParenthesisError",
    "eval_expr",
    "evaluate",
    "parse",
    "parse_expr",
    "tokenize",
]
