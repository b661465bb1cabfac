"""
Utility functions shared across SI tests.
"""
from pathlib import Path
import sys

from silang.interpreter import Interpreter
from silang.lexer import tokenize
from silang.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_line(line: str, line_num: int = 1):
    """
    Parse one line of source code and return its statement node.
    """
    return Parser(tokenize(line, line_num), "<test>", line_num).parse()


def parse_source(source: str) -> list:
    """
    Parse every line of source code and return the statement nodes.
    """
    return [parse_line(line, i) for i, line in enumerate(source.splitlines(), start=1)]


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.run_lines(source.splitlines())
    return interpreter


def eval_line(line: str):
    """
    Evaluate one statement in a fresh interpreter and return its value.
    """
    return Interpreter("<test>").run_statement(line)
