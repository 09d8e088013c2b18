"""Statement parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle the various statement forms in the language such as declarations,
blocks, conditionals and loops.

Simple statements (``var``, ``print``, expression statements) raise a single
`ParseError` on the first problem. Compound statements (blocks, ``if``,
``while``, ``for``) keep going after an error so that one pass reports as
many problems as possible; they raise a `ParseFailure` with everything they
collected once they are done.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import ParseError, ParseFailure
from loxlang.nodes import Block, Expr, Expression, If, Literal, Print, Stmt, Var, While
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser') -> Stmt:
    """
    Parse a declaration, falling back to an ordinary statement.

    Syntax:
        <var declaration> | <statement>

    Args:
        parser: The parser instance.

    Returns:
        Stmt: The parsed node.
    """
    if parser.check(TokenType.VAR):
        return parser.parse_var()
    return parser.statement()


def parse_statement(parser: 'Parser') -> Stmt:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        Stmt: The parsed node.
    """
    tok = parser.curr_token
    if tok.type == TokenType.PRINT:
        return parser.parse_print()
    elif tok.type == TokenType.LEFT_BRACE:
        return Block(tuple(parser.block()))
    elif tok.type == TokenType.IF:
        return parser.parse_if()
    elif tok.type == TokenType.WHILE:
        return parser.parse_while()
    elif tok.type == TokenType.FOR:
        return parser.parse_for()
    return parser.parse_expression_statement()


def parse_var(parser: 'Parser') -> Var:
    """
    Parse a variable declaration.

    Syntax:
        var <identifier> ( = <expression> )? ;

    Args:
        parser: The parser instance.

    Returns:
        Var: The declaration node; a missing initializer is None.
    """
    parser.eat(TokenType.VAR, "Expect 'var'.")
    name = parser.eat(TokenType.IDENTIFIER, "Expect variable name.")
    initializer = None
    if parser.match(TokenType.EQUAL):
        initializer = parser.expression()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
    return Var(name, initializer)


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression> ;
    """
    parser.eat(TokenType.PRINT, "Expect 'print'.")
    value = parser.expression()
    parser.eat(TokenType.SEMICOLON, "Expect ';' after value.")
    return Print(value)


def parse_expression_statement(parser: 'Parser') -> Expression:
    """
    Parse an expression used as a statement.

    Syntax:
        <expression> ;

    When the terminating ';' is missing the error keeps the parsed
    expression, so an interactive caller may still evaluate it.
    """
    expr = parser.expression()
    if not parser.match(TokenType.SEMICOLON):
        raise parser.error("Expect ';' after expression.", expression=expr)
    return Expression(expr)


def parse_block(parser: 'Parser') -> list[Stmt]:
    """
    Parse a block of declarations enclosed in braces.

    Syntax:
        { <declaration>* }

    Errors in nested declarations are collected and parsing carries on with
    the next declaration.

    Args:
        parser: The parser instance.

    Returns:
        list: The statements of the block.

    Raises:
        ParseFailure: With every error found inside the block.
    """
    parser.eat(TokenType.LEFT_BRACE, "Expect '{' before block.")
    statements: list[Stmt] = []
    errors: list[ParseError] = []
    while not parser.check(TokenType.RIGHT_BRACE) and not parser.is_at_end():
        stmt = parser.collect(parser.declaration, errors)
        if stmt is not None:
            statements.append(stmt)
    if not parser.match(TokenType.RIGHT_BRACE):
        errors.append(parser.error("Expect '}' after block."))
    if errors:
        raise ParseFailure(errors)
    return statements


def _parse_condition(parser: 'Parser', keyword: str, errors: list[ParseError]) -> Expr | None:
    """
    Parse the parenthesised condition of an 'if' or 'while'.

    On error the rest of the header is skipped so the body can still be parsed.
    """
    try:
        parser.eat(TokenType.LEFT_PAREN, f"Expect '(' after '{keyword}'.")
        condition = parser.expression()
        parser.eat(TokenType.RIGHT_PAREN, f"Expect ')' after {keyword} condition.")
        return condition
    except ParseError as error:
        errors.append(error)
        parser.skip_header()
        return None


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional 'if' statement with an optional else branch.

    Syntax:
        if ( <condition> ) <statement> ( else <statement> )?

    An 'else' binds to the nearest 'if', since the inner statement is parsed
    first and claims it.

    Raises:
        ParseFailure: With the errors of the condition and both branches.
    """
    parser.eat(TokenType.IF, "Expect 'if'.")
    errors: list[ParseError] = []
    condition = _parse_condition(parser, "if", errors)
    then_branch = parser.collect(parser.statement, errors)
    else_branch = None
    if parser.match(TokenType.ELSE):
        else_branch = parser.collect(parser.statement, errors)
    if errors:
        raise ParseFailure(errors)
    return If(condition, then_branch, else_branch)


def parse_while(parser: 'Parser') -> While:
    """
    Parse a 'while' loop.

    Syntax:
        while ( <condition> ) <statement>
    """
    parser.eat(TokenType.WHILE, "Expect 'while'.")
    errors: list[ParseError] = []
    condition = _parse_condition(parser, "while", errors)
    body = parser.collect(parser.statement, errors)
    if errors:
        raise ParseFailure(errors)
    return While(condition, body)


def parse_for(parser: 'Parser') -> Block:
    """
    Parse a 'for' loop and desugar it into a block containing a while loop.

    Syntax:
        for ( <initializer>? ; <condition>? ; <increment>? ) <statement>

    Produces:
        { <initializer> while (<condition> or true) { <statement> <increment>; } }

    No dedicated node exists for 'for'; the interpreter only ever sees the
    block, so the loop variable is scoped to the loop.
    """
    parser.eat(TokenType.FOR, "Expect 'for'.")
    errors: list[ParseError] = []
    initializer: Stmt | None = None
    condition: Expr | None = None
    increment: Expr | None = None
    try:
        parser.eat(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")
        if parser.match(TokenType.SEMICOLON):
            initializer = None
        elif parser.check(TokenType.VAR):
            initializer = parser.parse_var()
        else:
            initializer = parser.parse_expression_statement()

        if not parser.check(TokenType.SEMICOLON):
            condition = parser.expression()
        parser.eat(TokenType.SEMICOLON, "Expect ';' after loop condition.")

        if not parser.check(TokenType.RIGHT_PAREN):
            increment = parser.expression()
        parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")
    except ParseError as error:
        errors.append(error)
        parser.skip_header(stop_at_semicolon=False)

    body = parser.collect(parser.statement, errors)
    if errors:
        raise ParseFailure(errors)

    if increment is not None:
        body = Block((body, Expression(increment)))
    else:
        body = Block((body,))
    if condition is None:
        condition = Literal(True)
    loop = While(condition, body)

    if initializer is not None:
        return Block((initializer, loop))
    return Block((loop,))
