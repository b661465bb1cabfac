"""Shared definitions for AST operation identifiers.

This module centralizes the operator constants used by the parser and
interpreter to label expression nodes, together with the mapping from the
lexer's operator tokens. Keeping them in one place prevents the components
from drifting apart.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum

from silang.lexer import TokenKind


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Comparison
    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    # Unary
    NEG = "neg"
    NOT = "!"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return "-" if self is Op.NEG else self.value


BINARY_OPS: dict[TokenKind, Op] = {
    TokenKind.PLUS: Op.ADD,
    TokenKind.MINUS: Op.SUB,
    TokenKind.STAR: Op.MUL,
    TokenKind.SLASH: Op.DIV,
    TokenKind.EQUALS: Op.EQ,
    TokenKind.NOT_EQUALS: Op.NE,
    TokenKind.LESS: Op.LT,
    TokenKind.LESS_EQ: Op.LE,
    TokenKind.GREATER: Op.GT,
    TokenKind.GREATER_EQ: Op.GE,
}

UNARY_OPS: dict[TokenKind, Op] = {
    TokenKind.MINUS: Op.NEG,
    TokenKind.NOT: Op.NOT,
}


__all__ = ["Op", "BINARY_OPS", "UNARY_OPS"]
