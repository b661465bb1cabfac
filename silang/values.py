"""Runtime values.

A value is either an ``IntValue`` (signed 64-bit integer) or a ``BoolValue``.
There is no implicit coercion between the two: operators check the tag of
their operands and values of different tags never compare equal.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Union

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


@dataclass(frozen=True)
class IntValue:
    """Signed 64-bit integer."""
    value: int

    type_name = "integer"


@dataclass(frozen=True)
class BoolValue:
    """Boolean."""
    value: bool

    type_name = "boolean"


Value = Union[IntValue, BoolValue]


def wrap_int64(n: int) -> int:
    """
    Fold an arbitrary integer into signed 64-bit two's-complement range.
    """
    return ((n - INT64_MIN) & 0xFFFFFFFFFFFFFFFF) + INT64_MIN


def format_value(value: Value) -> str:
    """
    Render a value the way ``print`` shows it.
    """
    match value:
        case BoolValue(value=flag):
            return "true" if flag else "false"
        case IntValue(value=n):
            return str(n)
    raise TypeError(f"Not a runtime value: {value!r}")
