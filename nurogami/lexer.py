"""Lexer turning source text into a list of tokens."""

from __future__ import annotations

import string

from .errors import LexerError
from .token import Token, TokenType

_WHITESPACE = " \t\n\v\f\r"
_LETTERS = string.ascii_letters
_DIGITS = string.digits
_WORD_CHARS = _LETTERS + _DIGITS + "_"
_END = "\0"

_SPECIAL = {
    ";": TokenType.SEMICOLON,
    "=": TokenType.EQUALS,
    "(": TokenType.LEFTPAREN,
    ")": TokenType.RIGHTPAREN,
}

_TYPE_NAMES = {
    TokenType.ID: "ID",
    TokenType.INT: "INT",
    TokenType.EQUALS: "EQUALS",
    TokenType.LEFTPAREN: "LEFTPAREN",
    TokenType.RIGHTPAREN: "RIGHTPAREN",
    TokenType.SEMICOLON: "SEMICOLON",
    TokenType.ENDOFFILE: "ENDOFFILE",
    TokenType.RETURN: "RETURN",
    TokenType.KEYWORD: "KEYWORD",
}


class Lexer:
    """Splits source text into identifiers, keywords, integers and punctuation."""

    KEYWORDS = frozenset({"return", "display"})

    def __init__(self, source: str) -> None:
        if not source:
            raise ValueError("source is empty")
        self.source = source

    def tokenize(self) -> list[Token]:
        """Return every token of the source, ending with an ENDOFFILE token."""
        src = self.source
        size = len(src)
        pos = 0
        tokens: list[Token] = []

        while pos < size:
            while pos < size and src[pos] in _WHITESPACE:
                pos += 1
            ch = src[pos] if pos < size else _END

            if ch in _LETTERS or ch == "_":
                end = self._scan(pos + 1, _WORD_CHARS)
                word = src[pos:end]
                kind = TokenType.KEYWORD if word in self.KEYWORDS else TokenType.ID
                tokens.append(Token(kind, word))
                pos = end
                continue

            if ch in _DIGITS:
                end = self._scan(pos + 1, _DIGITS)
                tokens.append(Token(TokenType.INT, src[pos:end]))
                pos = end
                continue

            kind = _SPECIAL.get(ch)
            if kind is None:
                raise LexerError(f"Unexpected character '{ch}' at position {pos}")
            tokens.append(Token(kind, ch))
            pos += 1

        tokens.append(Token(TokenType.ENDOFFILE, "EOF"))
        return tokens

    def _scan(self, start: int, allowed: str) -> int:
        """Return the index of the first character from start not in allowed."""
        end = start
        while end < len(self.source) and self.source[end] in allowed:
            end += 1
        return end

    @staticmethod
    def type_to_string(token_type) -> str:
        """Return the display name of a token type."""
        return _TYPE_NAMES.get(token_type, "UNKNOWN")