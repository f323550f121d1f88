"""Turns source text into a stream of tokens."""

from __future__ import annotations

from collections.abc import Iterator

from crowlang.tokens import Token, TokenType, lookup_ident

_END = "\0"
_WHITESPACE = frozenset(" \t\n\r")
_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")

_SINGLE_CHAR = {
    "=": TokenType.ASSIGN,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "!": TokenType.BANG,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    ">": TokenType.GT,
    "<": TokenType.LT,
}

_DOUBLE_CHAR = {
    "==": TokenType.EQUAL,
    "!=": TokenType.NEQUAL,
}


class Lexer:
    """Reads tokens one at a time from a piece of source text."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    def _char(self, offset: int = 0) -> str:
        index = self._pos + offset
        return self._source[index] if index < len(self._source) else _END

    def _advance(self, count: int = 1) -> None:
        self._pos = min(self._pos + count, len(self._source))

    def _skip_whitespace(self) -> None:
        while self._char() in _WHITESPACE:
            self._advance()

    def _read_while(self, allowed: frozenset[str]) -> str:
        start = self._pos
        while self._char() in allowed:
            self._advance()
        return self._source[start:self._pos]

    def next_token(self) -> Token:
        """Return the next token; at the end of input this is always EOF."""
        self._skip_whitespace()
        ch = self._char()

        if ch == _END:
            self._advance()
            return Token(TokenType.EOF, "")

        pair = ch + self._char(1)
        if pair in _DOUBLE_CHAR:
            self._advance(2)
            return Token(_DOUBLE_CHAR[pair], pair)

        if ch in _SINGLE_CHAR:
            self._advance()
            return Token(_SINGLE_CHAR[ch], ch)

        if ch in _LETTERS:
            word = self._read_while(_LETTERS)
            return Token(lookup_ident(word), word)

        if ch in _DIGITS:
            return Token(TokenType.INT, self._read_while(_DIGITS))

        self._advance()
        return Token(TokenType.ILLEGAL, ch)

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, ending with the EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return


def tokenize(source: str) -> list[Token]:
    """Return every token of ``source``, the final EOF token included."""
    return list(Lexer(source))