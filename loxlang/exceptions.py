"""Errors.

Three disjoint families of errors, one per pipeline stage. They are never
converted into one another:

- scanning: :class:`LexError` diagnostics (non-fatal) and
  :class:`UnterminatedStringError` (fatal for the whole scan);
- parsing: :class:`ParseError` for a single problem and :class:`ParseFailure`
  for the aggregated list the parser reports;
- evaluation: :class:`LoxRuntimeError` and its subclasses.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


def _location(line=None, file=None) -> str:
    suffix = ""
    if line is not None:
        suffix += f" on line {line}"
    if file is not None:
        suffix += f" in {file}"
    return suffix


class LexError:
    """
    Non-fatal scanner diagnostic, e.g. an unexpected character.
    """
    __slots__ = ("message", "line")

    def __init__(self, message: str, line: int):
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return f"{self.message} on line {self.line}"

    def __repr__(self) -> str:
        return f"LexError({self.message!r}, line={self.line})"


class UnterminatedStringError(SyntaxError):
    """
    A string literal reached the end of input without its closing quote.
    """
    def __init__(self, value, line):
        self.value = value
        self.line = line
        super().__init__(f"Unterminated string with value {value!r} on line {line}")


class ParseErrorKind(str, Enum):
    """
    The grammar level at which a parse error was detected.
    """
    EXPRESSION = "Expression"
    STATEMENT = "Statement"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class ParseError(SyntaxError):
    """
    A single syntax error.

    ``expression`` is only set when an expression statement parsed completely
    but was missing its terminating ``;``. A line-oriented front end can use it
    to evaluate the bare expression instead. ``file`` names the script the
    error was found in.
    """
    def __init__(self, kind: ParseErrorKind, message: str, line: int, expression=None, file=None):
        self.kind = kind
        self.message = message
        self.line = line
        self.expression = expression
        self.file = file
        super().__init__(message)

    def __str__(self) -> str:
        return f"[Error while parsing {self.kind} at line {self.line}]: {self.message}"

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, {self.message!r}, line={self.line})"


class ParseFailure(Exception):
    """
    One or more syntax errors collected while parsing.
    """
    def __init__(self, errors: list[ParseError]):
        self.errors = list(errors)
        super().__init__("\n".join(str(error) for error in self.errors))


class LoxRuntimeError(RuntimeError):
    """
    Base class for errors raised while evaluating a program.
    """
    def __init__(self, message, line=None, file=None):
        self.message = message
        self.line = line
        self.file = file
        super().__init__(message + _location(line, file))


class UndefinedVariableException(LoxRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, file)


class OperandTypeException(LoxRuntimeError):
    """
    Error for operands of the wrong type for an operator.
    """
    def __init__(self, op, message, line=None, file=None):
        self.op = op
        super().__init__(message, line, file)


class UnknownOpException(LoxRuntimeError):
    """
    Error for unknown operations.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        super().__init__(f"Unknown operation '{op}'", line, file)
