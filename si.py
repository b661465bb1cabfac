"""
SI Language Interpreter

This is the main entry point for the SI language interpreter.

Workflow:
1. The script named on the command line is checked for the `.si` extension
   and read line by line.
2. The Lexer tokenizes each line into meaningful tokens.
3. The Parser processes the tokens of the line into one AST statement.
4. The Interpreter evaluates the statement against the environment shared by
   every line of the run.
5. The first error is reported and stops the run.

Set SIDEBUG to dump each line's tokens and AST to stderr.
"""
import os
import sys

from silang.diagnostics import report
from silang.exceptions import ScriptException
from silang.interpreter import Interpreter

SCRIPT_EXTENSION = ".si"


def print_usage():
    """
    Print usage.
    """
    print()
    print("SI Language Interpreter")
    print()
    print("Usage:")
    print("    si <script.si>")
    print()
    print("Arguments:")
    print("    <script.si>")
    print("        Path to an SI source file to execute. Each line holds exactly")
    print("        one statement terminated by ';'.")
    print()
    print("Example:")
    print("    si hello.si")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_enabled() -> bool:
    return bool(os.environ.get("SIDEBUG"))


def run_script(script_name: str) -> int:
    """
    Run an SI script, returning the process exit code.
    """
    if not script_name.endswith(SCRIPT_EXTENSION):
        print(f"Invalid file extension: {script_name} (expected {SCRIPT_EXTENSION})", file=sys.stderr)
        return 1
    interpreter = Interpreter(script_name, debug=debug_enabled())
    try:
        interpreter.run_file(script_name)
    except FileNotFoundError:
        print(f"File doesn't exist: {script_name}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read {script_name}: {e.strerror}", file=sys.stderr)
        return 1
    except ScriptException as e:
        source_line = interpreter.source_line if e.line == interpreter.line_num else None
        report(e, source_line)
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("SI Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>", debug=debug_enabled())
    line_num = 0
    while True:
        try:
            line = input(">>> ")
            if line.strip() in {"exit", "quit"}:
                break
            line_num += 1
            try:
                interpreter.run_statement(line, line_num)
            except ScriptException as e:
                report(e, line)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
