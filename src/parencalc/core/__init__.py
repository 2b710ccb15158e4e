"""Core parencalc functionality: IR, tokenizer, parser, evaluator, configuration."""

from . import ir
from .config import CalcConfig, load_config
from .errors import (
    CalcError,
    ConfigError,
    ErrorContext,
    InvalidCharacterError,
    NestingTooDeepError,
    NumericOverflowError,
    UnexpectedTokenError,
    UnmatchedParenthesisError,
)
from .expression_lang import eval_expr, evaluate, parse, parse_expr, tokenize

__all__ = [
    "ir",
    "CalcConfig",
    "load_config",
    "CalcError",
    "ConfigError",
    "ErrorContext",
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
