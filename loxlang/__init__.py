"""Lox: a small dynamically-typed scripting language.

The pipeline is scan -> parse -> evaluate:

    tokens = tokenize(source)
    statements = Parser(tokens).parse()
    Interpreter().interpret(statements)


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.parser import Parser, parse

__all__ = ["Interpreter", "Parser", "parse", "tokenize"]
