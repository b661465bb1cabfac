"""Errors.

Every error raised while lexing, parsing or evaluating a statement is fatal to
the run. Each carries the source position it was raised at so the driver can
point at the offending column.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ScriptException(Exception):
    """
    Base class for all SI errors.
    """
    kind = "Error"

    def __init__(self, message, line=None, column=None, file=None):
        self.message = message
        self.line = line
        self.column = column
        self.file = file
        if line is not None:
            message += f" on line {line}"
            if column is not None:
                message += f", column {column}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class LexException(ScriptException):
    """
    Error for unrecognized characters.
    """
    kind = "LexError"


class ParseException(ScriptException):
    """
    Error for unexpected or missing tokens.
    """
    kind = "ParseError"


class TypeMismatchException(ScriptException, TypeError):
    """
    Error for operands of the wrong type.
    """
    kind = "TypeError"


class UndefinedVariableException(ScriptException, NameError):
    """
    Error for undefined variables.
    """
    kind = "NameError"

    def __init__(self, varname, line=None, column=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, column, file)


class ArithmeticException(ScriptException, ArithmeticError):
    """
    Error for division by zero and out-of-range integers.
    """
    kind = "ArithmeticError"


class NestingException(ScriptException, RecursionError):
    """
    Error for expressions nested deeper than the evaluator can walk.
    """
    kind = "NestingError"
