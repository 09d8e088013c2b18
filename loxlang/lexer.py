"""Lexer for Lox.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, lexeme and source line number.

Tokens cover literals (numbers, strings, identifiers), keywords (``var``,
``print``, ``while`` …), operators and delimiters. Two-character operators
(``!=``, ``==``, ``<=``, ``>=``) are listed ahead of their one-character
prefixes so the longest match always wins. Comment text beginning with ``//``
is skipped, and newlines (including those inside string literals) advance the
line counter so line numbers stay accurate.

Unexpected characters are reported as :class:`LexError` diagnostics and
skipped. An unterminated string aborts the scan with
:class:`UnterminatedStringError`.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re

from loxlang.exceptions import LexError, UnterminatedStringError
from loxlang.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)


token_specification: list[tuple[str, str]] = [
    # Comments and whitespace
    ('COMMENT',       r'//[^\n]*'),
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[^\S\n]+'),

    # Literals
    ('STRING',        r'"[^"]*"'),
    ('UNTERMINATED',  r'"'),
    ('NUMBER',        r'[0-9]+(?:\.[0-9]+)?'),
    ('IDENTIFIER',    r'[A-Za-z][A-Za-z0-9]*'),

    # Two-character operators
    ('BANG_EQUAL',    r'!='),
    ('EQUAL_EQUAL',   r'=='),
    ('LESS_EQUAL',    r'<='),
    ('GREATER_EQUAL', r'>='),

    # One-character operators
    ('BANG',          r'!'),
    ('EQUAL',         r'='),
    ('LESS',          r'<'),
    ('GREATER',       r'>'),
    ('PLUS',          r'\+'),
    ('MINUS',         r'-'),
    ('STAR',          r'\*'),
    ('SLASH',         r'/'),

    # Delimiters
    ('LEFT_PAREN',    r'\('),
    ('RIGHT_PAREN',   r'\)'),
    ('LEFT_BRACE',    r'\{'),
    ('RIGHT_BRACE',   r'\}'),
    ('DOT',           r'\.'),
    ('COMMA',         r','),
    ('SEMICOLON',     r';'),

    # Anything else
    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
)


def tokenize(code: str, diagnostics: list[LexError] | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        diagnostics (list[LexError] | None): Optional list that receives a
            LexError for every unexpected character.

    Returns:
        list[Token]: The tokens in source order, terminated by an EOF token.

    Raises:
        UnterminatedStringError: If a string literal is never closed.
    """
    tokens: list[Token] = []
    line_num = 1

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            error = LexError(f"Unexpected character {value!r}", line_num)
            logger.warning("%s", error)
            if diagnostics is not None:
                diagnostics.append(error)
            continue

        if kind == 'UNTERMINATED':
            rest = code[match_obj.end():]
            raise UnterminatedStringError(rest, line_num + rest.count('\n'))
        elif kind == 'STRING':
            line_num += value.count('\n')
            tokens.append(Token(TokenType.STRING, value[1:-1], line_num))
        elif kind == 'NUMBER':
            tokens.append(Token(TokenType.NUMBER, value, line_num, float(value)))
        elif kind == 'IDENTIFIER':
            tokens.append(Token(KEYWORDS.get(value, TokenType.IDENTIFIER), value, line_num))
        else:
            tokens.append(Token(TokenType[kind], value, line_num))

    tokens.append(Token(TokenType.EOF, "", line_num))
    return tokens
