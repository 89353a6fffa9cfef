import dataclasses

import pytest

from nurogami.token import Token, TokenType


def test_token_type_order_matches_declaration():
    tokens = [Token(token_type, token_type.name) for token_type in TokenType]
    assert [token.value for token in tokens] == [
        "ID",
        "INT",
        "EQUALS",
        "RETURN",
        "SEMICOLON",
        "LEFTPAREN",
        "RIGHTPAREN",
        "KEYWORD",
        "ENDOFFILE",
    ]
    assert [token.type for token in tokens] == list(TokenType)


def test_token_fields():
    token = Token(TokenType.INT, "42")
    assert token.type is TokenType.INT
    assert token.value == "42"


def test_token_equality():
    assert Token(TokenType.ID, "x") == Token(TokenType.ID, "x")
    assert Token(TokenType.ID, "x") != Token(TokenType.KEYWORD, "x")


def test_token_is_immutable():
    token = Token(TokenType.SEMICOLON, ";")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.value = "="  # type: ignore[misc]
    assert token.value == ";"
    assert token.type is TokenType.SEMICOLON