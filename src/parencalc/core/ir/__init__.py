"""
parencalc Intermediate Representation (IR) types.
"""

from .expressions import BinaryExpr, BinaryOp, Expr, Literal

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Literal",
]
