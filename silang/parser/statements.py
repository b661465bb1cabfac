"""
Statement parsing utilities for SI.

These functions operate on a `silang.parser.parser.Parser` instance and
handle the three statement forms of the language. Every statement is
terminated by a semicolon:

    statement   := printStmt | varDecl | exprStmt
    printStmt   := "print" comparison ";"
    varDecl     := "var" IDENTIFIER "=" comparison ";"
    exprStmt    := comparison ";"
"""

from typing import TYPE_CHECKING

from silang.lexer import TokenKind
from silang.nodes import PrintStmt, VarDecl

if TYPE_CHECKING:
    from silang.parser import Parser


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        The statement node; a bare expression for expression statements.
    """
    tok = parser.peek()
    if tok is not None and tok.kind == TokenKind.PRINT:
        return parser.parse_print()
    if tok is not None and tok.kind == TokenKind.VAR:
        return parser.parse_var_decl()
    return parser.parse_expr_stmt()


def parse_print(parser: 'Parser') -> PrintStmt:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression>;

    Args:
        parser: The parser instance.

    Returns:
        PrintStmt: The print node.
    """
    tok = parser.expect(TokenKind.PRINT)
    expr_node = parser.comparison()
    parser.expect(TokenKind.SEMICOLON, "Expected ';' after expression")
    return PrintStmt(expr_node, tok)


def parse_var_decl(parser: 'Parser') -> VarDecl:
    """
    Parse a variable declaration.

    Syntax:
        var <identifier> = <expression>;

    Args:
        parser: The parser instance.

    Returns:
        VarDecl: The declaration node.
    """
    parser.expect(TokenKind.VAR)
    name = parser.expect(TokenKind.IDENTIFIER, "Expected a variable name")
    parser.expect(TokenKind.ASSIGN, "Expected '=' after variable name")
    return VarDecl(name, parser.parse_expr_stmt())


def parse_expr_stmt(parser: 'Parser'):
    """Parse an expression followed by ';' and return the expression."""
    expr_node = parser.comparison()
    parser.expect(TokenKind.SEMICOLON, "Expected ';' after expression")
    return expr_node
