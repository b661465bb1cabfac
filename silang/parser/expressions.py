"""
Expression parsing utilities for SI.

These functions operate on a `silang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, from the loosest
binding rule to the tightest:

    comparison  := term ( compOp comparison )?
    term        := factor ( ("+" | "-") factor )*
    factor      := unary ( ("*" | "/") unary )*
    unary       := ("-" | "!") primary | primary
    primary     := NUMBER | BOOL | IDENTIFIER | "(" term ")"

Two properties of the grammar are relied upon by existing scripts and are
kept as they are:
    - the right operand of a comparison is itself a comparison, so chains
      such as ``a < b < c`` nest to the right: ``a < (b < c)``;
    - a parenthesized group holds a term, so ``(1 < 2)`` is a syntax error.
"""

from typing import TYPE_CHECKING

from silang.lexer import TokenKind, describe
from silang.nodes import BinaryExpr, Literal, UnaryExpr
from silang.operations import BINARY_OPS, UNARY_OPS

if TYPE_CHECKING:
    from silang.parser import Parser


_COMPARISON_KINDS = (
    TokenKind.EQUALS,
    TokenKind.NOT_EQUALS,
    TokenKind.GREATER,
    TokenKind.GREATER_EQ,
    TokenKind.LESS,
    TokenKind.LESS_EQ,
)


# ---- Highest precedence ----

def parse_primary(parser: 'Parser'):
    """Parse a number, boolean, variable reference, or parenthesized term."""
    if parser.match(TokenKind.NUMBER, TokenKind.BOOL, TokenKind.IDENTIFIER):
        return Literal(parser.previous())

    if parser.match(TokenKind.LPAREN):
        inner = parser.term()
        parser.expect(TokenKind.RPAREN, "Expected ')' to close group")
        return inner

    tok = parser.peek()
    if tok is None:
        parser.error("Expected expression but reached end of line")
    parser.error(f"Expected expression but got '{describe(tok)}'", tok)


def parse_unary(parser: 'Parser'):
    """Parse a prefix '-' or '!'; the operand is a primary, not another unary."""
    if parser.match(TokenKind.MINUS, TokenKind.NOT):
        op_tok = parser.previous()
        return UnaryExpr(UNARY_OPS[op_tok.kind], parser.primary(), op_tok)
    return parser.primary()


def parse_factor(parser: 'Parser'):
    """Parse multiplication and division expressions."""
    result = parser.unary()
    while parser.match(TokenKind.STAR, TokenKind.SLASH):
        op_tok = parser.previous()
        result = BinaryExpr(result, BINARY_OPS[op_tok.kind], parser.unary(), op_tok)
    return result


def parse_term(parser: 'Parser'):
    """Parse addition and subtraction expressions."""
    result = parser.factor()
    while parser.match(TokenKind.PLUS, TokenKind.MINUS):
        op_tok = parser.previous()
        result = BinaryExpr(result, BINARY_OPS[op_tok.kind], parser.factor(), op_tok)
    return result


# ---- Entry point ----

def parse_comparison(parser: 'Parser'):
    """Parse comparison expressions (==, !=, <, >, <=, >=)."""
    result = parser.term()
    while parser.match(*_COMPARISON_KINDS):
        op_tok = parser.previous()
        # The recursive call consumes any further comparison operators.
        result = BinaryExpr(result, BINARY_OPS[op_tok.kind], parser.comparison(), op_tok)
    return result
