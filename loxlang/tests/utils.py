"""
Utility functions shared across Lox Language tests.
"""
import pytest

from loxlang.exceptions import ParseError, ParseFailure
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the list of statements.
    """
    return Parser(tokenize(source), "<test>").parse()


def parse_expression(source: str):
    """
    Parse a single expression and return its node.
    """
    return Parser(tokenize(source), "<test>").expression()


def parse_errors(source: str) -> list[ParseError]:
    """
    Parse source code that is expected to fail and return every error.
    """
    with pytest.raises(ParseFailure) as excinfo:
        parse_source(source)
    return excinfo.value.errors


def evaluate_source(source: str, interpreter: Interpreter | None = None):
    """
    Evaluate a single expression and return its value.
    """
    interpreter = interpreter if interpreter is not None else Interpreter("<test>")
    return interpreter.evaluate(parse_expression(source))


def run_source(source: str, interpreter: Interpreter | None = None) -> Interpreter:
    """
    Run a program and return the interpreter instance after execution.
    """
    interpreter = interpreter if interpreter is not None else Interpreter("<test>")
    interpreter.interpret(parse_source(source))
    return interpreter
