"""Interactive prompt and lexer for the .gami toy language."""

__version__ = "0.1.0"
__all__ = ["compiler", "errors", "lexer", "token"]