"""Errors raised while processing source code."""


class LexerError(RuntimeError):
    """Raised when the lexer meets input it cannot tokenize."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Lexer Error: {message}")
        self.message = message