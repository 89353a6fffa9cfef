"""Interactive front end: banner, file helpers and the command loop."""

from __future__ import annotations

import subprocess
import sys

from .errors import LexerError
from .lexer import Lexer

_BLUE = "\033[1;34m"
_GREEN = "\033[0;32m"
_RED = "\033[1;31m"
_RESET = "\033[0m"
_PROJECT_NAME = "Nurogami"
_PROMPT = f"{_GREEN}Nurogami » {_RESET}"

_BANNER = (
    "\n"
    "          ,    ,\n"
    "         /(    )\\           A W A K E N I N G\n"
    "        (  \\/\\/  )          T H E    F L A M E\n"
    "        (        )          N U R O G A M I\n"
    "         \\      /           \n"
    "          `.__.'\n"
    "    "
)

_HELP = (
    "Welcome to Nurogami Compiler!\n"
    "\n"
    "Here are some commands you can use:\n"
    "\n"
    ":exit - Exit the compiler.\n"
    "\n"
    ":run <filename> - Run a previously compiled program.\n"
    "\n"
    "<filename>.gami - Read and display the contents of a .gami file.\n"
    "\n"
    "Type the name of a file (with .gami extension) to read its content.\n"
)


def print_banner() -> None:
    """Print the start-up banner."""
    print(f"{_BLUE}🚀 Running {_PROJECT_NAME}...{_RESET}")
    print(_BANNER)


def file_exists(filename: str) -> bool:
    """Return True if the file can be opened for reading."""
    try:
        with open(filename, "rb"):
            return True
    except OSError:
        return False


def read_gami_file(filename: str) -> str:
    """Read a source file, echo its content and return it; return '' if unreadable."""
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            source = handle.read()
    except OSError:
        print(f"{_RED}Error: Unable to open file '{filename}'.{_RESET}")
        return ""
    print(source)
    return source


def _is_gami(name: str) -> bool:
    return name.rsplit(".", 1)[-1] == "gami"


def _clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _lex_file(filename: str) -> None:
    print(f"Reading .gami file: {filename}")
    source = read_gami_file(filename)
    try:
        for token in Lexer(source).tokenize():
            print(f"TokenType->{Lexer.type_to_string(token.type)} TokenValue->{token.value}")
    except LexerError as err:
        print(f"{_RED}{err}{_RESET}", file=sys.stderr)


def start_compiler() -> None:
    """Run the interactive command loop until 'exit' or end of input."""
    while True:
        try:
            line = input(_PROMPT)
        except EOFError:
            return

        if not line:
            continue
        if line == "help":
            print(_HELP, end="")
        elif line == "clear":
            _clear_screen()
        elif line == "exit":
            print("Goodbye, compiler wizard. 🧙‍♂️")
            return
        elif file_exists(line) and _is_gami(line):
            _lex_file(line)
        else:
            print(f"{_RED}Error: File '{line}' not found or not a .gami file.{_RESET}")


def main(argv=None) -> int:
    """Print the banner and start the interactive loop."""
    print_banner()
    start_compiler()
    return 0