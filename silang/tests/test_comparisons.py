"""Tests for comparison and equality operators."""
import pytest

from silang.exceptions import TypeMismatchException
from silang.tests.utils import eval_line
from silang.values import BoolValue


@pytest.mark.parametrize("source, expected", [
    ("1 < 2;", True),
    ("2 < 1;", False),
    ("2 <= 2;", True),
    ("3 > 2;", True),
    ("2 >= 3;", False),
    ("1 + 1 == 2;", True),
    ("1 != 1;", False),
    ("true == true;", True),
    ("true != false;", True),
])
def test_comparisons(source, expected):
    assert eval_line(source) == BoolValue(expected)


def test_values_of_different_types_are_never_equal():
    assert eval_line("1 == true;") == BoolValue(False)
    assert eval_line("1 != true;") == BoolValue(True)
    assert eval_line("0 == false;") == BoolValue(False)


def test_ordering_requires_integers():
    with pytest.raises(TypeMismatchException):
        eval_line("true < false;")


def test_chained_comparison_compares_against_inner_result():
    # 1 < (2 < 3) compares an integer with a boolean
    with pytest.raises(TypeMismatchException):
        eval_line("1 < 2 < 3;")
    # 1 == (1 == true) is 1 == false
    assert eval_line("1 == 1 == true;") == BoolValue(False)
    assert eval_line("true == 1 < 2;") == BoolValue(True)
