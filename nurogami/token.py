"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Kinds of token recognised by the lexer."""

    ID = 0
    INT = 1
    EQUALS = 2
    RETURN = 3
    SEMICOLON = 4
    LEFTPAREN = 5
    RIGHTPAREN = 6
    KEYWORD = 7
    ENDOFFILE = 8


@dataclass(frozen=True)
class Token:
    """A single lexical token: its kind and the text it was read from."""

    type: TokenType
    value: str