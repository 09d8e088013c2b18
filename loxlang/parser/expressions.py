"""
Expression parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. Every binary level folds its
operands iteratively, so all binary and logical operators associate to the
left.

Precedence, lowest first:

    assignment  ->  IDENTIFIER "=" assignment | logic_or
    logic_or    ->  logic_and ( "or" logic_and )*
    logic_and   ->  equality ( "and" equality )*
    equality    ->  comparison ( ( "!=" | "==" ) comparison )*
    comparison  ->  term ( ( "<" | "<=" | ">" | ">=" ) term )*
    term        ->  factor ( ( "-" | "+" ) factor )*
    factor      ->  unary ( ( "*" | "/" ) unary )*
    unary       ->  ( "!" | "-" ) unary | primary
    primary     ->  "true" | "false" | "nil" | NUMBER | STRING
                  | IDENTIFIER | "(" expression ")"


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import ParseErrorKind
from loxlang.nodes import Assign, Binary, Expr, Grouping, Literal, Logical, Unary, Variable
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


# ---- Entry point ----

def parse_expression(parser: 'Parser') -> Expr:
    """Parse an expression starting from the lowest-precedence rule."""
    return parser.assignment()


def parse_assignment(parser: 'Parser') -> Expr:
    """
    Parse an assignment.

    The target is parsed as an ordinary expression first; only a bare
    variable is accepted once the '=' is seen.
    """
    expr = parser.logic_or()

    if parser.check(TokenType.EQUAL):
        equals = parser.advance()
        value = parser.assignment()
        if isinstance(expr, Variable):
            return Assign(expr.name, value)
        raise parser.error(
            "Invalid assignment target.", ParseErrorKind.EXPRESSION, token=equals
        )

    return expr


# ---- Boolean ----

def parse_logic_or(parser: 'Parser') -> Expr:
    """Parse logical OR expressions using the 'or' keyword."""
    result = parser.logic_and()
    while parser.check(TokenType.OR):
        op_tok = parser.advance()
        result = Logical(result, op_tok, parser.logic_and())
    return result


def parse_logic_and(parser: 'Parser') -> Expr:
    """Parse logical AND expressions using the 'and' keyword."""
    result = parser.equality()
    while parser.check(TokenType.AND):
        op_tok = parser.advance()
        result = Logical(result, op_tok, parser.equality())
    return result


# ---- Comparison ----

def parse_equality(parser: 'Parser') -> Expr:
    """Parse equality expressions (==, !=)."""
    result = parser.comparison()
    while parser.check(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
        op_tok = parser.advance()
        result = Binary(result, op_tok, parser.comparison())
    return result


def parse_comparison(parser: 'Parser') -> Expr:
    """Parse comparison expressions (<, <=, >, >=)."""
    result = parser.term()
    while parser.check(
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
    ):
        op_tok = parser.advance()
        result = Binary(result, op_tok, parser.term())
    return result


# ---- Arithmetic ----

def parse_term(parser: 'Parser') -> Expr:
    """Parse addition and subtraction expressions."""
    result = parser.factor()
    while parser.check(TokenType.MINUS, TokenType.PLUS):
        op_tok = parser.advance()
        result = Binary(result, op_tok, parser.factor())
    return result


def parse_factor(parser: 'Parser') -> Expr:
    """Parse multiplication and division expressions."""
    result = parser.unary()
    while parser.check(TokenType.STAR, TokenType.SLASH):
        op_tok = parser.advance()
        result = Binary(result, op_tok, parser.unary())
    return result


# ---- Highest precedence ----

def parse_unary(parser: 'Parser') -> Expr:
    """Parse a prefix '!' or '-' applied to another unary expression."""
    if parser.check(TokenType.BANG, TokenType.MINUS):
        op_tok = parser.advance()
        return Unary(op_tok, parser.unary())
    return parser.primary()


def parse_primary(parser: 'Parser') -> Expr:
    """Parse a literal, a variable, or a parenthesized expression."""
    tok = parser.curr_token

    if tok.type == TokenType.TRUE:
        parser.advance()
        return Literal(True)

    if tok.type == TokenType.FALSE:
        parser.advance()
        return Literal(False)

    if tok.type == TokenType.NIL:
        parser.advance()
        return Literal(None)

    if tok.type == TokenType.NUMBER:
        parser.advance()
        return Literal(tok.number)

    if tok.type == TokenType.STRING:
        parser.advance()
        return Literal(tok.lexeme)

    if tok.type == TokenType.IDENTIFIER:
        parser.advance()
        return Variable(tok)

    if tok.type == TokenType.LEFT_PAREN:
        parser.advance()
        inner = parser.expression()
        parser.eat(
            TokenType.RIGHT_PAREN,
            "Expect ')' after expression.",
            ParseErrorKind.EXPRESSION,
        )
        return Grouping(inner)

    raise parser.error("Expect expression.", ParseErrorKind.EXPRESSION)
