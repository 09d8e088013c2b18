"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, string concatenation, comparisons, logical operators, variables, nested block
scopes, conditionals, loops, and output statements.

1. Execution Model
The interpreter walks the syntax tree directly, eagerly, depth-first and left to right.
Statements are executed via `execute()` (or `interpret()` for a whole program), and
expressions are evaluated using `evaluate()`.

2. Environment
The interpreter owns one `Environment`, a stack of scopes that outlives a single call to
`interpret()`. Successive calls, such as successive REPL inputs, see the variables declared
by earlier ones. Blocks push a scope on entry and pop it on every exit path.

3. Values
Lox values map onto Python values: strings are `str`, numbers are `float`, booleans are
`bool` and nil is `None`. Only nil and false are falsy. Equality is structural and never
mixes types, so `true == 1` is false.

4. Error Handling
Runtime errors (undefined variables, operands of the wrong type) are raised as
`LoxRuntimeError` subclasses with line numbers and file context. The first one aborts the
remaining statements of the current `interpret()` call.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math

from loxlang.environment import Environment
from loxlang.exceptions import OperandTypeException, UnknownOpException
from loxlang.nodes import (
    Assign,
    Binary,
    Block,
    Expr,
    Expression,
    Grouping,
    If,
    Literal,
    Logical,
    Print,
    Stmt,
    Unary,
    Value,
    Var,
    Variable,
    While,
    format_expr,
    format_number,
)
from loxlang.tokens import Token, TokenType


def is_truthy(value: Value) -> bool:
    """
    Return False for nil and false, True for everything else.
    """
    return value is not None and value is not False


def is_number(value: Value) -> bool:
    """
    Return True for Lox numbers; booleans are not numbers.
    """
    return type(value) is float


def is_equal(lhs: Value, rhs: Value) -> bool:
    """
    Structural equality that never considers values of different types equal.
    """
    if type(lhs) is not type(rhs):
        return False
    return lhs == rhs


def stringify(value: Value) -> str:
    """
    Return the display form of a value as written by ``print``.
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return value


def divide(lhs: float, rhs: float) -> float:
    """
    IEEE-754 division: dividing by zero gives an infinity or NaN.
    """
    if rhs == 0.0:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


class Interpreter:
    """Tree-walk interpreter for Lox."""

    def __init__(self, file: str = "<stdin>"):
        """Initialize the interpreter."""
        self.file = file
        self.environment = Environment(file)

    def interpret(self, statements: list[Stmt]) -> None:
        """
        Execute a list of statements in order.

        Parameters:
            statements (list): The statements produced by the parser.

        Raises:
            LoxRuntimeError: On the first runtime error; later statements are skipped.
        """
        for stmt in statements:
            self.execute(stmt)

    def execute(self, stmt: Stmt) -> None:
        """
        Execute a single statement.

        Raises:
            TypeError: For an unknown statement node.
        """
        match stmt:
            case Expression(expression):
                self.evaluate(expression)

            case Print(expression):
                print(stringify(self.evaluate(expression)))

            case Var(name, initializer):
                value = self.evaluate(initializer) if initializer is not None else None
                self.environment.define(name.lexeme, value)

            case Block(statements):
                with self.environment.scope():
                    for inner in statements:
                        self.execute(inner)

            case If(condition, then_branch, else_branch):
                if is_truthy(self.evaluate(condition)):
                    self.execute(then_branch)
                elif else_branch is not None:
                    self.execute(else_branch)

            case While(condition, body):
                while is_truthy(self.evaluate(condition)):
                    self.execute(body)

            case _:
                raise TypeError(f"Unknown statement type: {stmt!r}")

    def evaluate(self, node: Expr) -> Value:
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (Expr): An expression node.

        Returns:
            The evaluated result of the expression.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            OperandTypeException: If an operator is applied to operands of the wrong type.
            UnknownOpException: If an unrecognized operator is encountered.
        """
        match node:
            case Literal(value):
                return value

            case Grouping(expression):
                return self.evaluate(expression)

            case Variable(name):
                return self.environment.get(name.lexeme, name.line)

            case Assign(name, value_node):
                value = self.evaluate(value_node)
                self.environment.assign(name.lexeme, value, name.line)
                return value

            case Logical(left, operator, right):
                lhs = self.evaluate(left)
                if operator.type == TokenType.OR:
                    if is_truthy(lhs):
                        return lhs
                elif operator.type == TokenType.AND:
                    if not is_truthy(lhs):
                        return lhs
                else:
                    raise UnknownOpException(operator.lexeme, operator.line, self.file)
                return self.evaluate(right)

            case Unary(operator, right):
                operand = self.evaluate(right)
                match operator.type:
                    case TokenType.MINUS:
                        if not is_number(operand):
                            raise self._operand_error(
                                operator, "Operand of unary minus (-) must be a number", node
                            )
                        return -operand
                    case TokenType.BANG:
                        return not is_truthy(operand)
                    case _:
                        raise UnknownOpException(operator.lexeme, operator.line, self.file)

            case Binary(left, operator, right):
                lhs = self.evaluate(left)
                rhs = self.evaluate(right)
                return self._binary(operator, lhs, rhs, node)

        raise TypeError(f"Invalid expression node: {node!r}")

    def _binary(self, operator: Token, lhs: Value, rhs: Value, node: Binary) -> Value:
        """
        Apply a binary operator to two evaluated operands.
        """
        op = operator.type
        match op:
            # Equality
            case TokenType.EQUAL_EQUAL:
                return is_equal(lhs, rhs)
            case TokenType.BANG_EQUAL:
                return not is_equal(lhs, rhs)

            # Concatenation
            case TokenType.PLUS if isinstance(lhs, str) and isinstance(rhs, str):
                return lhs + rhs

        if not (is_number(lhs) and is_number(rhs)):
            if op == TokenType.PLUS:
                message = "Operands of '+' must be two numbers or two strings"
            elif op in (
                TokenType.LESS,
                TokenType.LESS_EQUAL,
                TokenType.GREATER,
                TokenType.GREATER_EQUAL,
            ):
                message = f"Operands of '{operator.lexeme}' must be two numbers to compare"
            else:
                message = f"Operands of '{operator.lexeme}' must be two numbers"
            raise self._operand_error(operator, message, node)

        match op:
            # Arithmetic
            case TokenType.PLUS:
                return lhs + rhs
            case TokenType.MINUS:
                return lhs - rhs
            case TokenType.STAR:
                return lhs * rhs
            case TokenType.SLASH:
                return divide(lhs, rhs)
            # Comparison
            case TokenType.LESS:
                return lhs < rhs
            case TokenType.LESS_EQUAL:
                return lhs <= rhs
            case TokenType.GREATER:
                return lhs > rhs
            case TokenType.GREATER_EQUAL:
                return lhs >= rhs
            case _:
                raise UnknownOpException(operator.lexeme, operator.line, self.file)

    def _operand_error(self, operator: Token, message: str, node: Expr) -> OperandTypeException:
        return OperandTypeException(
            operator.lexeme,
            f"{message}: {format_expr(node)}",
            operator.line,
            self.file,
        )
