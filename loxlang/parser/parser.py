"""
Main parser entry point for Lox.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`loxlang.parser.expressions` and `loxlang.parser.statements`.

Parsing never stops at the first error. Expression rules raise a single
`ParseError`; statement rules that contain other statements collect the
errors of their children and raise a `ParseFailure` once they have parsed
as far as they can. The top level gathers everything and only returns a
statement list when no error was recorded at all.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Callable, TypeVar

from loxlang.exceptions import ParseError, ParseErrorKind, ParseFailure
from loxlang.nodes import Expr, Stmt
from loxlang.tokens import STATEMENT_KEYWORDS, Token, TokenType

from . import expressions as _expr
from . import statements as _stmt

T = TypeVar("T")


class Parser:
    """Lox parser."""

    def __init__(self, tokens: list[Token], file: str = "<stdin>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with EOF.
            file (str): The name of the script.
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            line = tokens[-1].line if tokens else 1
            tokens = [*tokens, Token(TokenType.EOF, "", line)]
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file


    # Cursor helpers
    def is_at_end(self) -> bool:
        """
        Return True once the EOF token is current.
        """
        return self.curr_token.type == TokenType.EOF

    def previous(self) -> Token:
        """
        Return the most recently consumed token.
        """
        return self.tokens[self.position - 1]

    def advance(self) -> Token:
        """
        Consume the current token and return it. EOF is never consumed.
        """
        tok = self.curr_token
        if not self.is_at_end():
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def check(self, *token_types: TokenType) -> bool:
        """
        Return True if the current token is one of the given types.
        """
        return self.curr_token.type in token_types

    def match(self, *token_types: TokenType) -> bool:
        """
        Consume the current token if it is one of the given types.
        """
        if self.check(*token_types):
            self.advance()
            return True
        return False

    def eat(
        self,
        token_type: TokenType,
        message: str,
        kind: ParseErrorKind = ParseErrorKind.STATEMENT,
    ) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            message (str): The error message if the token does not match.
            kind (ParseErrorKind): The grammar level reporting the error.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.check(token_type):
            return self.advance()
        raise self.error(message, kind)

    def error(
        self,
        message: str,
        kind: ParseErrorKind = ParseErrorKind.STATEMENT,
        token: Token | None = None,
        expression: Expr | None = None,
    ) -> ParseError:
        """
        Build a ParseError located at the given token (default: the current one).
        """
        tok = token if token is not None else self.curr_token
        return ParseError(kind, message, tok.line, expression, self.source_file)


    # Error recovery
    def synchronize(self) -> None:
        """
        Discard tokens until the next likely statement boundary.

        Stops just after a ``;`` or just before a statement keyword or a
        ``}``. A ``}`` or EOF under the cursor is left in place so that an
        enclosing block can still close.
        """
        if self.check(TokenType.RIGHT_BRACE, TokenType.EOF):
            return
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.curr_token.type in STATEMENT_KEYWORDS or self.check(TokenType.RIGHT_BRACE):
                return
            self.advance()

    def skip_header(self, stop_at_semicolon: bool = True) -> None:
        """
        Skip the rest of a parenthesised statement header after an error.

        Consumes through the ``)`` that closes the header when one is found.
        Stops early, without consuming, at a brace, a statement keyword or
        (unless told otherwise) a ``;``.
        """
        depth = 0
        while not self.is_at_end():
            token_type = self.curr_token.type
            if token_type == TokenType.LEFT_PAREN:
                depth += 1
            elif token_type == TokenType.RIGHT_PAREN:
                if depth == 0:
                    self.advance()
                    return
                depth -= 1
            elif (
                token_type in (TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE)
                or token_type in STATEMENT_KEYWORDS
                or (stop_at_semicolon and token_type == TokenType.SEMICOLON)
            ):
                return
            self.advance()

    def collect(self, rule: Callable[[], T], errors: list[ParseError]) -> T | None:
        """
        Run a statement rule, moving any errors it raises into ``errors``.

        A bare ParseError has not been recovered from yet, so the parser is
        resynchronised. A ParseFailure has already recovered internally.

        Returns:
            The rule's result, or None if it failed.
        """
        try:
            return rule()
        except ParseFailure as failure:
            errors.extend(failure.errors)
        except ParseError as error:
            errors.append(error)
            self.synchronize()
        return None


    # Expression wrappers
    def expression(self) -> Expr:
        """
        Parse a full expression.
        """
        return _expr.parse_expression(self)

    def assignment(self) -> Expr:
        """
        Parse an assignment or anything of higher precedence.
        """
        return _expr.parse_assignment(self)

    def logic_or(self) -> Expr:
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logic_or(self)

    def logic_and(self) -> Expr:
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logic_and(self)

    def equality(self) -> Expr:
        """
        Parse an equality expression using '==' or '!='.
        """
        return _expr.parse_equality(self)

    def comparison(self) -> Expr:
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def term(self) -> Expr:
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self) -> Expr:
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def unary(self) -> Expr:
        """
        Parse a prefix '!' or '-' expression.
        """
        return _expr.parse_unary(self)

    def primary(self) -> Expr:
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)


    # Statement wrappers
    def declaration(self) -> Stmt:
        """
        Parse a declaration or a statement.
        """
        return _stmt.parse_declaration(self)

    def statement(self) -> Stmt:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> list[Stmt]:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def parse_var(self) -> Stmt:
        """
        Parse a 'var' declaration.
        """
        return _stmt.parse_var(self)

    def parse_print(self) -> Stmt:
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_if(self) -> Stmt:
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_while(self) -> Stmt:
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self)

    def parse_for(self) -> Stmt:
        """
        Parse a 'for' loop into its while-loop equivalent.
        """
        return _stmt.parse_for(self)

    def parse_expression_statement(self) -> Stmt:
        """
        Parse an expression followed by ';'.
        """
        return _stmt.parse_expression_statement(self)


    def parse(self) -> list[Stmt]:
        """
        Parse the full input into a list of statements.

        Raises:
            ParseFailure: Carrying every error found, if there was any.
        """
        statements: list[Stmt] = []
        errors: list[ParseError] = []
        while not self.is_at_end():
            start = self.position
            stmt = self.collect(self.declaration, errors)
            if stmt is not None:
                statements.append(stmt)
            elif self.position == start:
                # A stray '}' that nothing can consume.
                self.advance()
        if errors:
            raise ParseFailure(errors)
        return statements


def parse(tokens: list[Token], file: str = "<stdin>") -> list[Stmt]:
    """
    Parse a token list into statements.

    Raises:
        ParseFailure: If any syntax error was found.
    """
    return Parser(tokens, file).parse()
