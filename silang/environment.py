"""Variable environment.

One flat, global namespace shared by every line of a run. Declaring a name
that already exists silently overwrites it.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from silang.exceptions import UndefinedVariableException
from silang.values import Value


class Environment:
    """
    Mapping from variable name to runtime value.
    """
    def __init__(self, file: str = None):
        self.vars: dict[str, Value] = {}
        self.file = file

    def define(self, name: str, value: Value) -> None:
        """
        Bind a name, replacing any previous binding.
        """
        self.vars[name] = value

    def lookup(self, name: str, line: int = None, column: int = None) -> Value:
        """
        Return the value bound to a name.

        Raises:
            UndefinedVariableException: If the name has never been declared.
        """
        if name in self.vars:
            return self.vars[name]
        raise UndefinedVariableException(name, line, column, self.file)

    def snapshot(self) -> dict[str, Value]:
        """
        Return a copy of the current bindings.
        """
        return dict(self.vars)

    def clear(self) -> None:
        self.vars.clear()

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        return f"Environment({self.vars!r})"
