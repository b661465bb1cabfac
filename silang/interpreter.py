"""Interpreter.

This is a tree-walk interpreter for evaluating the AST nodes produced by the
parser. Scripts are executed one line at a time: each line is tokenized,
parsed into a single statement and evaluated before the next line is read.

1. Execution Model
`run_statement()` drives one line through lexer, parser and `evaluate()`.
`evaluate()` is a single `match` over the closed node set; statements
(`VarDecl`, `PrintStmt`) are evaluated for their effect and yield None,
expressions yield a runtime value.

2. Environment
The interpreter owns one `Environment` for the whole run. It is passed
explicitly to every `evaluate()` call so a node can be evaluated against any
environment, which keeps the evaluator free of hidden state.

3. Expression Evaluation
Both operands of a binary operator are evaluated before the operator is
applied. Arithmetic and ordering require integer operands, `!` requires a
boolean, unary `-` an integer. `==` and `!=` accept any two values; values of
different types are never equal. Integer results wrap to signed 64 bits and
division truncates toward zero.

4. Error Handling
Lexing, parsing and runtime errors are raised as typed exceptions carrying
line, column and file. Nothing is caught here: the first error ends the run.
A RecursionError from walking a very deep expression is re-raised as a
NestingException so it is reported like any other script error.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys
from typing import Iterable

from silang.environment import Environment
from silang.exceptions import (
    ArithmeticException,
    NestingException,
    TypeMismatchException,
)
from silang.lexer import TokenKind, tokenize
from silang.nodes import (
    BinaryExpr,
    Literal,
    Node,
    PrintStmt,
    UnaryExpr,
    VarDecl,
    format_node,
)
from silang.operations import Op
from silang.parser import Parser
from silang.values import (
    INT64_MAX,
    BoolValue,
    IntValue,
    Value,
    format_value,
    wrap_int64,
)


def _truncating_div(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


class Interpreter:
    """
    Tree-walk interpreter for SI.
    """
    def __init__(self, file: str = "<stdin>", env: Environment = None, debug: bool = False):
        """
        Initialize the interpreter.

        Parameters:
            file (str): The script name, used in error messages.
            env (Environment): The environment to run against; a fresh one by default.
            debug (bool): Dump the tokens and AST of every line to stderr.
        """
        self.file = file
        self.env = env if env is not None else Environment(file)
        self.debug = debug
        # The line being executed, kept for error diagnostics.
        self.source_line = None
        self.line_num = 0

    def _type_error(self, message: str, node: Node):
        tok = node.token
        raise TypeMismatchException(
            f"{message}: {format_node(node)}", tok.line, tok.column, self.file
        )

    def eval_literal(self, node: Literal, env: Environment) -> Value:
        """
        Evaluate a number, boolean, or variable reference.

        Raises:
            ArithmeticException: If a number does not fit in 64 bits.
            UndefinedVariableException: If a variable has not been declared.
        """
        tok = node.token
        match tok.kind:
            case TokenKind.NUMBER:
                try:
                    value = int(tok.text, 10)
                except ValueError:
                    raise ArithmeticException(
                        f"Invalid number '{tok.text}'", tok.line, tok.column, self.file
                    ) from None
                if value > INT64_MAX:
                    raise ArithmeticException(
                        f"Integer literal {tok.text} out of 64-bit range",
                        tok.line, tok.column, self.file,
                    )
                return IntValue(value)
            case TokenKind.BOOL:
                return BoolValue(tok.text == "true")
            case TokenKind.IDENTIFIER:
                return env.lookup(tok.text, tok.line, tok.column)
        self._type_error("Invalid value", node)

    def eval_unary(self, node: UnaryExpr, env: Environment) -> Value:
        """
        Evaluate a prefix '-' or '!'.
        """
        operand = self.evaluate(node.operand, env)
        match node.op, operand:
            case Op.NEG, IntValue(value=n):
                return IntValue(wrap_int64(-n))
            case Op.NOT, BoolValue(value=flag):
                return BoolValue(not flag)
            case Op.NEG, _:
                self._type_error("Unary minus (-) requires an integer operand", node)
            case Op.NOT, _:
                self._type_error("Logical not (!) requires a boolean operand", node)
        self._type_error(f"Unknown unary operator '{str(node.op)}'", node)

    def eval_binary(self, node: BinaryExpr, env: Environment) -> Value:
        """
        Evaluate an arithmetic or comparison operation.

        Raises:
            TypeMismatchException: If the operand types do not suit the operator.
            ArithmeticException: On division by zero.
        """
        lhs = self.evaluate(node.left, env)
        rhs = self.evaluate(node.right, env)
        if lhs is None or rhs is None:
            self._type_error("Invalid operation", node)

        op = node.op
        if op == Op.EQ:
            return BoolValue(lhs == rhs)
        if op == Op.NE:
            return BoolValue(lhs != rhs)

        if not (isinstance(lhs, IntValue) and isinstance(rhs, IntValue)):
            self._type_error(
                f"Operator '{str(op)}' requires integer operands, "
                f"got {lhs.type_name} and {rhs.type_name}",
                node,
            )
        a, b = lhs.value, rhs.value
        match op:
            # Comparison
            case Op.LT:
                return BoolValue(a < b)
            case Op.LE:
                return BoolValue(a <= b)
            case Op.GT:
                return BoolValue(a > b)
            case Op.GE:
                return BoolValue(a >= b)
            # Arithmetic
            case Op.ADD:
                return IntValue(wrap_int64(a + b))
            case Op.SUB:
                return IntValue(wrap_int64(a - b))
            case Op.MUL:
                return IntValue(wrap_int64(a * b))
            case Op.DIV:
                if b == 0:
                    tok = node.token
                    raise ArithmeticException(
                        f"Division by zero: {format_node(node)}",
                        tok.line, tok.column, self.file,
                    )
                return IntValue(wrap_int64(_truncating_div(a, b)))
        self._type_error(f"Unknown binary operator '{str(op)}'", node)

    def evaluate(self, node: Node, env: Environment = None) -> Value | None:
        """
        Evaluate a node against an environment.

        Parameters:
            node (Node): A statement or expression node.
            env (Environment): Defaults to the interpreter's own environment.

        Returns:
            The value of an expression, or None for statements.
        """
        if env is None:
            env = self.env
        match node:
            case Literal():
                return self.eval_literal(node, env)
            case UnaryExpr():
                return self.eval_unary(node, env)
            case BinaryExpr():
                return self.eval_binary(node, env)
            case VarDecl(name=name, initializer=init):
                env.define(name.text, self.evaluate(init, env))
                return None
            case PrintStmt(expr=expr):
                print(format_value(self.evaluate(expr, env)))
                return None
        raise TypeError(f"Invalid AST node: {node!r}")

    def run_statement(self, line: str, line_num: int = 1) -> Value | None:
        """
        Tokenize, parse and evaluate one line of source.

        Returns:
            The value of an expression statement, otherwise None.
        """
        self.source_line = line
        self.line_num = line_num
        tokens = tokenize(line, line_num, self.file)
        try:
            ast = Parser(tokens, self.file, line_num).parse()
            if self.debug:
                print(f"[{line_num}] tokens: {tokens}", file=sys.stderr)
                print(f"[{line_num}] ast: {format_node(ast)}", file=sys.stderr)
            return self.evaluate(ast, self.env)
        except RecursionError:
            raise NestingException(
                "Expression too deeply nested", line_num, 1, self.file
            ) from None

    def run_lines(self, lines: Iterable[str], start: int = 1) -> None:
        """
        Execute lines in order, one statement per line. The first error
        propagates and the remaining lines are not executed.
        """
        for line_num, line in enumerate(lines, start=start):
            self.run_statement(line.rstrip("\r\n"), line_num)

    def run_file(self, path: str) -> None:
        """
        Execute a script file line by line.

        Lines are read lazily and split on newlines only, so every line before a
        bad one runs first. Bytes that are not valid UTF-8 decode to lone
        surrogates, which the lexer rejects as unrecognized characters.
        """
        with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            self.run_lines(f)
