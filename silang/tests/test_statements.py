"""Tests for declarations, printing and line-by-line execution."""
import pytest

from silang.environment import Environment
from silang.exceptions import (
    ArithmeticException,
    LexException,
    NestingException,
    ParseException,
    UndefinedVariableException,
)
from silang.interpreter import Interpreter
from silang.tests.utils import parse_line, run_source
from silang.values import BoolValue, IntValue


def test_declare_print_and_redeclare(capsys):
    source = (
        "var x = 5;\n"
        "print x;\n"
        "var x = 9;\n"
        "print x;\n"
    )
    interpreter = run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['5', '9']
    assert interpreter.env.snapshot() == {'x': IntValue(9)}


def test_print_formats_values(capsys):
    run_source(
        "print 2 * 21;\n"
        "print 1 < 2;\n"
        "print !true;\n"
        "print -3;\n"
    )
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['42', 'true', 'false', '-3']


def test_variables_in_expressions(capsys):
    run_source(
        "var width = 6;\n"
        "var height = width - 2;\n"
        "var area = width * height;\n"
        "var big = area >= 20;\n"
        "print area;\n"
        "print big;\n"
        "print !big == false;\n"
    )
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['24', 'true', 'true']


def test_expression_statement_prints_nothing(capsys):
    interpreter = Interpreter('<test>')
    assert interpreter.run_statement("1 + 2;") == IntValue(3)
    assert interpreter.run_statement("var y = true;") is None
    assert interpreter.run_statement("print y;") is None
    assert capsys.readouterr().out == "true\n"


def test_undefined_variable():
    with pytest.raises(UndefinedVariableException) as excinfo:
        run_source("print y;")
    err = excinfo.value
    assert isinstance(err, NameError)
    assert err.varname == 'y'
    assert (err.line, err.column, err.file) == (1, 7, '<test>')


def test_declaration_is_not_visible_to_its_own_initializer():
    with pytest.raises(UndefinedVariableException):
        run_source("var z = z + 1;")


def test_first_error_stops_the_run(capsys):
    with pytest.raises(ArithmeticException) as excinfo:
        run_source(
            "print 1;\n"
            "print 1 / 0;\n"
            "print 2;\n"
        )
    assert excinfo.value.line == 2
    assert capsys.readouterr().out.strip().splitlines() == ['1']


def test_failing_print_emits_nothing(capsys):
    with pytest.raises(UndefinedVariableException):
        run_source("print 1 + missing;")
    assert capsys.readouterr().out == ""


def test_blank_line_is_fatal():
    with pytest.raises(ParseException) as excinfo:
        run_source("var a = 1;\n\nprint a;\n")
    assert excinfo.value.line == 2


def test_runs_are_deterministic(capsys):
    source = (
        "var a = 3;\n"
        "var b = a * a - 1;\n"
        "print b / a;\n"
        "print b == 8;\n"
    )
    run_source(source)
    first = capsys.readouterr().out
    run_source(source)
    second = capsys.readouterr().out
    assert first == second == "2\ntrue\n"


def test_evaluate_against_explicit_environment():
    env = Environment('<test>')
    env.define('n', IntValue(4))
    interpreter = Interpreter('<test>')
    assert interpreter.evaluate(parse_line("n * 2;"), env) == IntValue(8)
    interpreter.evaluate(parse_line("var m = n > 3;"), env)
    assert env.lookup('m') == BoolValue(True)
    assert 'm' not in interpreter.env


def test_run_lines_strips_line_terminators(capsys):
    interpreter = Interpreter('<test>')
    interpreter.run_lines(["var a = 1;\r\n", "print a;\n"])
    assert capsys.readouterr().out == "1\n"


def test_run_file(tmp_path, capsys):
    script = tmp_path / "prog.si"
    script.write_text("var x = 10;\nprint x / 3;\n", encoding="utf-8")
    interpreter = Interpreter(str(script))
    interpreter.run_file(str(script))
    assert capsys.readouterr().out == "3\n"
    assert interpreter.env.lookup('x') == IntValue(10)


def test_deeply_nested_expression_is_a_script_error(capsys):
    interpreter = Interpreter('<test>')
    assert interpreter.run_statement("1" + " + 1" * 99 + ";") == IntValue(100)
    with pytest.raises(NestingException) as excinfo:
        interpreter.run_statement("print 1" + " + 1" * 5000 + ";", 3)
    err = excinfo.value
    assert (err.line, err.file) == (3, '<test>')
    assert "too deeply nested" in str(err)
    # the interpreter is still usable afterwards
    interpreter.run_statement("print 2;", 4)
    assert capsys.readouterr().out == "2\n"


def test_run_file_handles_crlf(tmp_path, capsys):
    script = tmp_path / "crlf.si"
    script.write_bytes(b"var a = 4;\r\nprint a;\r\n")
    Interpreter(str(script)).run_file(str(script))
    assert capsys.readouterr().out == "4\n"


def test_run_file_runs_lines_before_invalid_bytes(tmp_path, capsys):
    script = tmp_path / "bad.si"
    script.write_bytes(b"print 1;\nprint \xff;\nprint 3;\n")
    with pytest.raises(LexException) as excinfo:
        Interpreter(str(script)).run_file(str(script))
    assert (excinfo.value.line, excinfo.value.column) == (2, 7)
    assert capsys.readouterr().out == "1\n"
