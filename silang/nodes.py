"""AST node definitions for SI.

The node set is closed: a statement is a ``VarDecl``, a ``PrintStmt`` or a bare
expression, and an expression is a ``BinaryExpr``, a ``UnaryExpr`` or a
``Literal``. Nodes are immutable and own their children; the interpreter
dispatches over them with a single ``match``.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from silang.lexer import Token, TokenKind
from silang.operations import Op


@dataclass(frozen=True)
class Literal:
    """A number, boolean, or variable reference."""
    token: Token


@dataclass(frozen=True)
class UnaryExpr:
    """A prefix ``-`` or ``!`` applied to a primary expression."""
    op: Op
    operand: Expr
    token: Token


@dataclass(frozen=True)
class BinaryExpr:
    """An arithmetic or comparison operation."""
    left: Expr
    op: Op
    right: Expr
    token: Token


@dataclass(frozen=True)
class VarDecl:
    """``var <name> = <initializer>;``"""
    name: Token
    initializer: Expr


@dataclass(frozen=True)
class PrintStmt:
    """``print <expr>;``"""
    expr: Expr
    token: Token


Expr = Union[Literal, UnaryExpr, BinaryExpr]
Node = Union[VarDecl, PrintStmt, Literal, UnaryExpr, BinaryExpr]


def format_node(node: Node) -> str:
    """
    Convert an AST back to a readable string for debugging.
    """
    match node:
        case VarDecl(name=name, initializer=init):
            return f"var {name.text} = {format_node(init)};"
        case PrintStmt(expr=expr):
            return f"print {format_node(expr)};"
        case BinaryExpr(left=left, op=op, right=right):
            return f"({format_node(left)} {str(op)} {format_node(right)})"
        case UnaryExpr(op=op, operand=operand):
            return f"{str(op)}{format_node(operand)}"
        case Literal(token=tok):
            if tok.kind in (TokenKind.NUMBER, TokenKind.BOOL, TokenKind.IDENTIFIER):
                return tok.text
            return f"<{tok.kind.value}>"
    raise TypeError(f"Not an AST node: {node!r}")
