"""Splitting program text into tokens."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from schemelet.values import SchemeSyntaxError, Symbol

_INITIAL_PUNCTUATION = frozenset("!$&*/:<=>?-_^")
_SUBSEQUENT_EXTRA = frozenset("0123456789+-.")
_LETTERS = frozenset(string.ascii_letters)

_TOKEN_RE = re.compile(
    r"""
    (?P<comment>;[^\n]*)
    |(?P<space>[ \n])
    |(?P<open>\()
    |(?P<close>\))
    |(?P<number>[-+]?[0-9]+(?:\.[0-9]*)?)
    |(?P<bool>\#.?)
    |(?P<string>"[^"]*")
    |(?P<symbol>[-+A-Za-z!$&*/:<=>?_^][-+.0-9A-Za-z!$&*/:<=>?_^]*)
    """,
    re.VERBOSE | re.DOTALL,
)


class TokenType(Enum):
    OPEN = "open"
    CLOSE = "close"
    INT = "integer"
    DOUBLE = "double"
    STRING = "string"
    BOOL = "boolean"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Token:
    """One lexical token and its value."""

    type: TokenType
    value: Any


def is_valid_initial(char: str) -> bool:
    """True if char may start a symbol."""
    return char in _LETTERS or char in _INITIAL_PUNCTUATION


def is_valid_subsequent(char: str) -> bool:
    """True if char may appear after the first character of a symbol."""
    return is_valid_initial(char) or char in _SUBSEQUENT_EXTRA


def _number(lexeme: str) -> Token:
    if "." not in lexeme:
        return Token(TokenType.INT, int(lexeme))
    negative = lexeme.startswith("-")
    whole, frac = lexeme.lstrip("+-").split(".")
    value = int(whole) + (int(frac) / 10 ** len(frac) if frac else 0.0)
    return Token(TokenType.DOUBLE, -value if negative else value)


def _boolean(lexeme: str) -> Token:
    flag = lexeme[1:]
    if flag not in ("t", "f"):
        raise SchemeSyntaxError("boolean was not #t or #f")
    return Token(TokenType.BOOL, flag == "t")


def tokenize(text: str) -> list[Token]:
    """Split program text into a list of tokens."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            char = text[pos]
            if char == '"':
                raise SchemeSyntaxError("unterminated string")
            raise SchemeSyntaxError(
                f"symbol {char} does not start with an allowed first character."
            )
        kind, lexeme = match.lastgroup, match.group()
        pos = match.end()
        if kind == "open":
            tokens.append(Token(TokenType.OPEN, "("))
        elif kind == "close":
            tokens.append(Token(TokenType.CLOSE, ")"))
        elif kind == "number":
            tokens.append(_number(lexeme))
        elif kind == "bool":
            tokens.append(_boolean(lexeme))
        elif kind == "string":
            tokens.append(Token(TokenType.STRING, lexeme[1:-1]))
        elif kind == "symbol":
            tokens.append(Token(TokenType.SYMBOL, Symbol(lexeme)))
    return tokens


def _describe(token: Token) -> str:
    kind = token.type
    if kind is TokenType.BOOL:
        text = "#t" if token.value else "#f"
    elif kind is TokenType.DOUBLE:
        text = f"{token.value:f}"
    elif kind is TokenType.STRING:
        text = f'"{token.value}"'
    else:
        text = str(token.value)
    return f"{text}:{kind.value}"


def display_tokens(tokens: Iterable[Token]) -> str:
    """Describe each token on its own line as value:type."""
    return "".join(_describe(token) + "\n" for token in tokens)