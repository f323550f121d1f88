"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """Every kind of token the language knows."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    IDENT = "IDENT"
    INT = "INT"

    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"

    COMMA = ","
    SEMICOLON = ";"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    FUNCTION = "FUNCTION"
    LET = "LET"
    IF = "IF"
    TRUE = "TRUE"
    FALSE = "FALSE"
    ELSE = "ELSE"
    RETURN = "RETURN"

    EQUAL = "=="
    NEQUAL = "!="

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A token kind together with the source text it was read from."""

    type: TokenType
    literal: str


_KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword token type for ``ident``, or IDENT if it is not a keyword."""
    return _KEYWORDS.get(ident, TokenType.IDENT)