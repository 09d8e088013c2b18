"""Token definitions for Lox.

Every token produced by the lexer carries a :class:`TokenType`, the exact
source text it was scanned from (its lexeme), the line it ends on and, for
numeric literals, the parsed ``float`` value.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of every token kind the lexer can produce.
    """

    # Single-character tokens
    DOT = "."
    COMMA = ","
    SEMICOLON = ";"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"

    # One or two character tokens
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="

    # Literals
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    EOF = "eof"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

# Keywords that can only start a statement; the parser resynchronises on them.
STATEMENT_KEYWORDS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


@dataclass(frozen=True, slots=True, repr=False)
class Token:
    """
    Represents a lexical token with a type, lexeme and source line.

    Tokens are immutable once scanned, so they hash and compare by value.

    Attributes:
        type (TokenType): The token type.
        lexeme (str): The source text of the token (string contents for STRING).
        line (int): The source line the token ends on.
        number (float | None): The parsed value of a NUMBER token.
    """
    type: TokenType
    lexeme: str
    line: int
    number: float | None = None

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        if self.number is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, line={self.line}, number={self.number})"
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line})"
