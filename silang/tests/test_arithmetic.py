"""Tests for integer arithmetic and unary operators."""
import pytest

from silang.exceptions import ArithmeticException, TypeMismatchException
from silang.tests.utils import eval_line
from silang.values import INT64_MAX, INT64_MIN, BoolValue, IntValue


@pytest.mark.parametrize("literal", ["0", "1", "42", "007", str(INT64_MAX)])
def test_integer_literals_evaluate_to_themselves(literal):
    assert eval_line(f"{literal};") == IntValue(int(literal))


def test_precedence_and_grouping():
    assert eval_line("2 + 3 * 4;") == IntValue(14)
    assert eval_line("(2 + 3) * 4;") == IntValue(20)


def test_left_associativity():
    assert eval_line("10 - 3 - 2;") == IntValue(5)
    assert eval_line("100 / 10 / 5;") == IntValue(2)


def test_division_truncates_toward_zero():
    assert eval_line("7 / 2;") == IntValue(3)
    assert eval_line("-7 / 2;") == IntValue(-3)
    assert eval_line("7 / -2;") == IntValue(-3)
    assert eval_line("-7 / -2;") == IntValue(3)


def test_division_by_zero():
    with pytest.raises(ArithmeticException) as excinfo:
        eval_line("1 / 0;")
    assert isinstance(excinfo.value, ArithmeticError)
    assert excinfo.value.column == 3


def test_unary_minus_and_not():
    assert eval_line("-5;") == IntValue(-5)
    assert eval_line("!true;") == BoolValue(False)
    assert eval_line("!false;") == BoolValue(True)
    assert eval_line("-(2 - 5);") == IntValue(3)


def test_results_wrap_to_64_bits():
    assert eval_line(f"{INT64_MAX} + 1;") == IntValue(INT64_MIN)
    assert eval_line(f"0 - {INT64_MAX} - 2;") == IntValue(INT64_MAX)


def test_literal_out_of_range():
    with pytest.raises(ArithmeticException):
        eval_line(f"{INT64_MAX + 1};")


def test_arithmetic_requires_integers():
    with pytest.raises(TypeMismatchException) as excinfo:
        eval_line("1 + true;")
    assert isinstance(excinfo.value, TypeError)
    assert "integer" in str(excinfo.value)
    with pytest.raises(TypeMismatchException):
        eval_line("false * 2;")


def test_unary_operand_types():
    with pytest.raises(TypeMismatchException):
        eval_line("-true;")
    with pytest.raises(TypeMismatchException):
        eval_line("!1;")
