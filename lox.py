"""
Lox Language Interpreter

This is the main entry point for the Lox language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar,
   collecting every syntax error it finds.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Set the LOXDEBUG environment variable to dump the tokens and AST before
execution.
"""
import logging
import os
import sys

from loxlang.exceptions import (
    LoxRuntimeError,
    ParseErrorKind,
    ParseFailure,
    UnterminatedStringError,
)
from loxlang.interpreter import Interpreter, stringify
from loxlang.lexer import tokenize
from loxlang.nodes import format_stmt
from loxlang.parser import Parser


def print_usage():
    """
    Print usage.
    """
    print()
    print("Lox Language Interpreter")
    print()
    print("Usage:")
    print("    lox <script.lox>")
    print()
    print("Arguments:")
    print("    <script.lox>")
    print("        Path to a Lox source file to execute.")
    print()
    print("Example:")
    print("    lox hello.lox")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    for stmt in ast:
        print(format_stmt(stmt))
    print(" ")


def report_runtime_error(error: LoxRuntimeError):
    """
    Print a runtime error on a single line.
    """
    print(f"[RuntimeError]: {error}", file=sys.stderr)


def run(source: str, interpreter: Interpreter, repl_mode: bool = False) -> bool:
    """
    Scan, parse and execute one piece of source code.

    In REPL mode, input that only lacks the final ';' of an expression
    statement is evaluated as a bare expression and its value echoed.

    Returns:
        bool: True if the code ran without any error.
    """
    try:
        tokens = tokenize(source)
    except UnterminatedStringError as e:
        print(f"[Error while scanning at line {e.line}]: {e}", file=sys.stderr)
        return False

    try:
        ast = Parser(tokens, interpreter.file).parse()
    except ParseFailure as failure:
        errors = failure.errors
        if (
            repl_mode
            and len(errors) == 1
            and errors[0].kind == ParseErrorKind.STATEMENT
            and errors[0].expression is not None
        ):
            try:
                print(stringify(interpreter.evaluate(errors[0].expression)))
            except LoxRuntimeError as e:
                report_runtime_error(e)
                return False
            return True
        for error in errors:
            print(error, file=sys.stderr)
        return False

    if os.environ.get('LOXDEBUG'):
        debug_print_tokens_ast(tokens, ast)

    try:
        interpreter.interpret(ast)
    except LoxRuntimeError as e:
        report_runtime_error(e)
        return False
    return True


def run_script(script_name: str) -> int:
    """
    Run a Lox script
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    interpreter = Interpreter(script_name)
    return 0 if run(code, interpreter) else 1


def run_repl():
    """
    Run the interactive REPL
    """
    print("Lox Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    while True:
        try:
            line = input("> ")
            if line.strip() in {"exit", "quit"}:
                break
            run(line, interpreter, repl_mode=True)
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
    logging.basicConfig(
        level=logging.WARNING,
        format="[Error while scanning]: %(message)s",
    )
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


if __name__ == "__main__":
    sys.exit(main(sys.argv))
