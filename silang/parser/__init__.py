"""Parser package for SI.

This package splits the parser functionality into multiple modules to
keep the code organized. The :class:`Parser` class is exposed at the
package level for convenience, along with :func:`parse`, which builds the
statement node for a list of tokens in one call.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .parser import Parser


def parse(tokens: list, file: str = None, line_num: int = None):
    """
    Parse the tokens of one line into a statement node.
    """
    return Parser(tokens, file, line_num).parse()


__all__ = ["Parser", "parse"]
