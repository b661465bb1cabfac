"""Error reporting for the SI driver.

Formats a ScriptException as a compiler-style diagnostic:

    script.si:3:9: error: TypeError: Operator '+' requires integer operands ...
      print 1 + true;
              ^

termcolor highlights the message and the caret; it leaves text uncoloured
when NO_COLOR is set or the stream is not a terminal.


File: diagnostics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys

from termcolor import colored

from silang.exceptions import ScriptException

ERROR = "red"


def _printable(text: str) -> str:
    # undecodable input bytes arrive as lone surrogates; show them as \xNN
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def diagnose(source_line: str, column: int) -> str:
    """
    Return the source line with a caret under the given 1-based column.
    """
    column = max(1, min(column, len(source_line) + 1))
    prefix = _printable(source_line[:column - 1])
    caret = colored("^", ERROR, attrs=["bold"])
    return f"  {prefix}{_printable(source_line[column - 1:])}\n  {' ' * len(prefix)}{caret}"


def format_error(error: ScriptException, source_line: str = None) -> str:
    """
    Render an error with its location and, when available, a caret diagnosis.
    """
    location = error.file or "<stdin>"
    if error.line is not None:
        location += f":{error.line}"
        if error.column is not None:
            location += f":{error.column}"

    text = colored(f"{location}: ", attrs=["bold"])
    text += colored("error: ", ERROR, attrs=["bold"])
    text += f"{error.kind}: {error.message}"

    if source_line is not None and error.column is not None:
        text += "\n" + diagnose(source_line, error.column)
    return text


def report(error: ScriptException, source_line: str = None, stream=None) -> None:
    """
    Print an error diagnostic, to stderr by default.
    """
    print(format_error(error, source_line), file=stream if stream is not None else sys.stderr)
