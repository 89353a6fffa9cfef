import pytest

from nurogami.errors import LexerError


def test_message_is_prefixed():
    err = LexerError("bad input")
    assert str(err) == "Lexer Error: bad input"


def test_original_message_kept():
    err = LexerError("bad input")
    assert err.message == "bad input"


def test_is_runtime_error():
    err = LexerError("oops")
    assert isinstance(err, RuntimeError)
    assert str(err) == "Lexer Error: oops"
    assert err.message == "oops"


@pytest.mark.parametrize(
    "message, expected",
    [
        ("", "Lexer Error: "),
        ("Unexpected character '$' at position 3", "Lexer Error: Unexpected character '$' at position 3"),
    ],
)
def test_prefix_for_various_messages(message, expected):
    err = LexerError(message)
    assert str(err) == expected
    assert err.message == message