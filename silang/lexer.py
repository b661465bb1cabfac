"""Lexer for SI.

This is a regex-based lexer that tokenizes a single line of source code into a
flat list of tokens. Scripts are processed one line at a time, so the lexer
keeps no state between calls; the caller supplies the line number.

1. Token Definitions
Token types are defined via named regular expressions (token_specification).
The combined regex is an ordered alternation, so at every position the first
pattern in the list that matches wins. The order encodes the disambiguation
rules of the language:
    - two-character comparison operators come before their one-character
      prefixes (``>=`` before ``>``, ``==`` before ``=``, ``!=`` before ``!``);
    - keywords (``true``, ``print``, ``false``, ``var``) come before identifiers
      and are matched as plain prefixes, with no word-boundary check.

2. Keyword Prefixes
Because keywords are matched without a trailing boundary, an identifier that
starts with a keyword spelling is split: ``trueValue`` lexes as ``true``
followed by the identifier ``Value`` and ``variable`` as ``var`` followed by
``iable``.

3. Whitespace
Only the ASCII space is skipped. Tabs and any other unrecognized character
raise a LexException.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass
from enum import Enum

from silang.exceptions import LexException


class TokenKind(str, Enum):
    """
    Enumeration of token kinds produced by the lexer.
    """

    # Literals
    NUMBER = "NUMBER"
    BOOL = "BOOL"
    IDENTIFIER = "IDENTIFIER"

    # Arithmetic
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"

    # Grouping
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"

    # Comparison
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    LESS = "LESS"
    LESS_EQ = "LESS_EQ"
    GREATER = "GREATER"
    GREATER_EQ = "GREATER_EQ"

    # Miscellaneous
    ASSIGN = "ASSIGN"
    NOT = "NOT"
    SEMICOLON = "SEMICOLON"

    # Keywords
    PRINT = "PRINT"
    VAR = "VAR"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Attributes:
        kind (TokenKind): The token kind.
        text (str): The literal text, only set for numbers, booleans and identifiers.
        line (int): The 1-based source line.
        column (int): The 1-based column of the first character of the token.
    """
    kind: TokenKind
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        if self.text:
            return f"Token({self.kind.value}, {self.text!r}, {self.line}:{self.column})"
        return f"Token({self.kind.value}, {self.line}:{self.column})"


# Ordered: the first matching alternative wins at each position.
token_specification: list[tuple[str, str]] = [
    # Single-character punctuation that no longer operator starts with
    ('PLUS',       r'\+'),
    ('MINUS',      r'-'),
    ('STAR',       r'\*'),
    ('SLASH',      r'/'),
    ('LPAREN',     r'\('),
    ('RPAREN',     r'\)'),

    # Literals
    ('NUMBER',     r'[0-9]+'),

    # Keywords (prefix match, no word boundary)
    ('TRUE',       r'true'),
    ('PRINT',      r'print'),
    ('FALSE',      r'false'),
    ('VAR',        r'var'),

    # Comparison operators, longest first
    ('GREATER_EQ', r'>='),
    ('LESS_EQ',    r'<='),
    ('LESS',       r'<'),
    ('GREATER',    r'>'),
    ('EQUALS',     r'=='),
    ('NOT_EQUALS', r'!='),
    ('ASSIGN',     r'='),

    # Remaining punctuation
    ('NOT',        r'!'),
    ('SEMICOLON',  r';'),

    # Miscellaneous
    ('SKIP',       r' +'),
    ('IDENTIFIER', r'[A-Za-z][A-Za-z0-9]*'),
    ('MISMATCH',   r'.'),
]

_tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)

_BOOL_GROUPS = {'TRUE': 'true', 'FALSE': 'false'}

# Spelling of every fixed-text token kind, used in parser error messages.
TOKEN_LITERALS: dict[TokenKind, str] = {
    TokenKind.PLUS: '+',
    TokenKind.MINUS: '-',
    TokenKind.STAR: '*',
    TokenKind.SLASH: '/',
    TokenKind.LPAREN: '(',
    TokenKind.RPAREN: ')',
    TokenKind.EQUALS: '==',
    TokenKind.NOT_EQUALS: '!=',
    TokenKind.LESS: '<',
    TokenKind.LESS_EQ: '<=',
    TokenKind.GREATER: '>',
    TokenKind.GREATER_EQ: '>=',
    TokenKind.ASSIGN: '=',
    TokenKind.NOT: '!',
    TokenKind.SEMICOLON: ';',
    TokenKind.PRINT: 'print',
    TokenKind.VAR: 'var',
}


def tokenize(line: str, line_num: int = 1, file: str = None) -> list[Token]:
    """
    Convert one line of source code into a list of tokens.

    Parameters:
        line (str): The source line, without its line terminator.
        line_num (int): The line number recorded on every token.
        file (str): The script name, used in error messages.

    Returns:
        list[Token]: The tokens in source order.

    Raises:
        LexException: If an unrecognized character is encountered.
    """
    tokens = []
    for match_obj in _tok_regex.finditer(line):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start() + 1

        if kind == 'SKIP':
            continue
        if kind == 'MISMATCH':
            raise LexException(
                f"Unrecognized character {value!r}",
                line=line_num, column=column, file=file,
            )

        if kind in _BOOL_GROUPS:
            tokens.append(Token(TokenKind.BOOL, _BOOL_GROUPS[kind], line_num, column))
        elif kind in ('NUMBER', 'IDENTIFIER'):
            tokens.append(Token(TokenKind[kind], value, line_num, column))
        else:
            tokens.append(Token(TokenKind[kind], '', line_num, column))

    return tokens


def describe(token: Token) -> str:
    """
    Return the source spelling of a token for error messages.
    """
    return token.text or TOKEN_LITERALS.get(token.kind, token.kind.value)
