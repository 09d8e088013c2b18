"""Abstract syntax tree node definitions.

Expressions and statements are closed families of frozen dataclasses. Each
node owns its children; the parser never shares a subtree between two parents.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from loxlang.tokens import Token

# Runtime value of a Lox expression: nil is ``None``.
Value = Union[str, float, bool, None]


# ---- Expressions ----

@dataclass(frozen=True)
class Binary:
    left: 'Expr'
    operator: Token
    right: 'Expr'


@dataclass(frozen=True)
class Unary:
    operator: Token
    right: 'Expr'


@dataclass(frozen=True)
class Grouping:
    expression: 'Expr'


@dataclass(frozen=True)
class Literal:
    value: Value


@dataclass(frozen=True)
class Variable:
    name: Token


@dataclass(frozen=True)
class Assign:
    name: Token
    value: 'Expr'


@dataclass(frozen=True)
class Logical:
    left: 'Expr'
    operator: Token
    right: 'Expr'


Expr = Union[Binary, Unary, Grouping, Literal, Variable, Assign, Logical]


# ---- Statements ----

@dataclass(frozen=True)
class Expression:
    expression: Expr


@dataclass(frozen=True)
class Print:
    expression: Expr


@dataclass(frozen=True)
class Var:
    name: Token
    initializer: Expr | None = None


@dataclass(frozen=True)
class Block:
    statements: tuple['Stmt', ...]


@dataclass(frozen=True)
class If:
    condition: Expr
    then_branch: 'Stmt'
    else_branch: 'Stmt | None' = None


@dataclass(frozen=True)
class While:
    condition: Expr
    body: 'Stmt'


Stmt = Union[Expression, Print, Var, Block, If, While]


def format_number(value: float) -> str:
    """
    Render a float in positional notation from its shortest round-trip digits.

    Integral values drop the trailing ``.0``; exponent notation is never used,
    so ``1e-05`` prints as ``0.00001`` and ``1e+23`` as ``100000000000000000000000``.
    """
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_expr(node: Expr) -> str:
    """
    Convert an expression back to a parenthesised prefix form for debugging.

    Args:
        node (Expr): An expression node.

    Returns:
        str: e.g. ``(+ 1 (group (* 2 3)))``.
    """
    match node:
        case Binary(left, operator, right) | Logical(left, operator, right):
            return f"({operator.lexeme} {format_expr(left)} {format_expr(right)})"
        case Unary(operator, right):
            return f"({operator.lexeme} {format_expr(right)})"
        case Grouping(expression):
            return f"(group {format_expr(expression)})"
        case Assign(name, value):
            return f"(= {name.lexeme} {format_expr(value)})"
        case Variable(name):
            return name.lexeme
        case Literal(value):
            if value is None:
                return "nil"
            if isinstance(value, bool):
                return "true" if value else "false"
            if isinstance(value, float):
                return format_number(value)
            return f'"{value}"'
    raise TypeError(f"Invalid expression node: {node!r}")


def format_stmt(node: Stmt, indent: int = 0) -> str:
    """
    Convert a statement to an indented, parenthesised form for debugging.
    """
    pad = "  " * indent
    match node:
        case Expression(expression):
            return f"{pad}(; {format_expr(expression)})"
        case Print(expression):
            return f"{pad}(print {format_expr(expression)})"
        case Var(name, None):
            return f"{pad}(var {name.lexeme})"
        case Var(name, initializer):
            return f"{pad}(var {name.lexeme} {format_expr(initializer)})"
        case Block(statements):
            inner = "\n".join(format_stmt(stmt, indent + 1) for stmt in statements)
            return f"{pad}(block\n{inner})" if statements else f"{pad}(block)"
        case If(condition, then_branch, else_branch):
            text = f"{pad}(if {format_expr(condition)}\n{format_stmt(then_branch, indent + 1)}"
            if else_branch is not None:
                text += f"\n{format_stmt(else_branch, indent + 1)}"
            return text + ")"
        case While(condition, body):
            return f"{pad}(while {format_expr(condition)}\n{format_stmt(body, indent + 1)})"
    raise TypeError(f"Invalid statement node: {node!r}")
