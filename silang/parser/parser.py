"""
Main parser entry point for SI.

This module defines the `Parser` class, which owns the token cursor and
coordinates the recursive descent parsing process. The actual parsing
routines are split across `silang.parser.expressions` and
`silang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from silang.exceptions import ParseException
from silang.lexer import TOKEN_LITERALS, Token, TokenKind, describe

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """SI parser for a single statement."""

    def __init__(self, tokens: list, file: str = None, line_num: int = None):
        """
        Initialize the parser with the tokens of one line.

        Parameters:
            tokens (list): A list of Token instances.
            file (str): The name of the script.
            line_num (int): The source line, used when the token list is empty.
        """
        self.tokens = tokens
        self.position = 0
        self.source_file = file
        if line_num is None:
            line_num = tokens[0].line if tokens else 1
        self.line_num = line_num


    # Cursor
    def is_at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def peek(self) -> Token | None:
        """
        Return the current token without consuming it, or None at end of line.
        """
        if self.is_at_end():
            return None
        return self.tokens[self.position]

    def previous(self) -> Token:
        """
        Return the most recently consumed token.
        """
        if self.position <= 0:
            raise ParseException("No token consumed yet", self.line_num, 1, self.source_file)
        return self.tokens[self.position - 1]

    def advance(self) -> Token:
        """
        Consume and return the current token.

        Raises:
            ParseException: If there are no tokens left on the line.
        """
        if self.is_at_end():
            self.error("Unexpected end of line")
        tok = self.tokens[self.position]
        self.position += 1
        return tok

    def match(self, *kinds: TokenKind) -> bool:
        """
        Consume the current token if it is one of the given kinds.
        """
        tok = self.peek()
        if tok is not None and tok.kind in kinds:
            self.position += 1
            return True
        return False

    def expect(self, kind: TokenKind, message: str = None) -> Token:
        """
        Consume the current token if it matches the expected kind.

        Parameters:
            kind (TokenKind): The expected token kind.
            message (str): Leading text of the error message.

        Raises:
            ParseException: If the token does not match or the line has ended.
        """
        expected = TOKEN_LITERALS.get(kind, kind.value.lower())
        if message is None:
            message = f"Expected '{expected}'"
        tok = self.peek()
        if tok is None:
            self.error(f"{message} but reached end of line")
        if tok.kind != kind:
            self.error(f"{message} but got '{describe(tok)}'", tok)
        self.position += 1
        return tok

    def error(self, message: str, token: Token = None):
        """
        Raise a ParseException positioned at a token, or just past the last
        token when none is given.
        """
        if token is not None:
            line, column = token.line, token.column
        elif self.tokens:
            last = self.tokens[-1]
            line, column = last.line, last.column + len(describe(last))
        else:
            line, column = self.line_num, 1
        raise ParseException(message, line, column, self.source_file)


    # Expression wrappers
    def comparison(self):
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def term(self):
        """
        Parse addition and subtraction.
        """
        return _expr.parse_term(self)

    def factor(self):
        """
        Parse multiplication and division.
        """
        return _expr.parse_factor(self)

    def unary(self):
        """
        Parse a prefix operator applied to a primary.
        """
        return _expr.parse_unary(self)

    def primary(self):
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)


    # Statement wrappers
    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_print(self):
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_var_decl(self):
        """
        Parse a variable declaration.
        """
        return _stmt.parse_var_decl(self)

    def parse_expr_stmt(self):
        """
        Parse an expression terminated by a semicolon.
        """
        return _stmt.parse_expr_stmt(self)


    def parse(self):
        """
        Parse the tokens into exactly one statement node.

        Anything after the terminating semicolon is ignored.
        """
        return self.statement()
