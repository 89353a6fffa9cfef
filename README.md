# nurogami

An interactive prompt for the `.gami` toy language. Give it the name of a
`.gami` source file and it prints the file and then lists the tokens that the
lexer finds in it.

## Installation

```
pip install .
```

## Interactive use

Start the prompt:

```
nurogami
```

It prints a banner and then shows the `Nurogami » ` prompt. At the prompt you
can type:

| Input         | Effect                                                                 |
|---------------|------------------------------------------------------------------------|
| `help`        | Show the help text                                                     |
| `clear`       | Run the system `clear` command to clear the terminal                   |
| `exit`        | Print a farewell and leave the prompt                                  |
| `<file>.gami` | Print the file's content, then print each token with its type          |

An empty line is ignored. End of input (Ctrl-D) also leaves the prompt. Any
other input, including the name of a file that does not exist or that does not
end in `.gami`, gets the reply
`Error: File '<input>' not found or not a .gami file.`

Each token is printed like this:

```
TokenType->KEYWORD TokenValue->return
TokenType->INT TokenValue->42
TokenType->SEMICOLON TokenValue->;
TokenType->ENDOFFILE TokenValue->EOF
```

When the lexer meets a character it does not recognise, it writes a
`Lexer Error: Unexpected character '<c>' at position <n>` message to standard
error and the prompt carries on.

## The language, as far as the lexer goes

- Identifiers: an ASCII letter or `_`, followed by ASCII letters, digits or `_`
- Keywords: `return` and `display`, both reported with the type `KEYWORD`
- Integers: runs of decimal digits
- Punctuation: `;`, `=`, `(`, `)`
- Whitespace separates tokens and is otherwise skipped

Whitespace is only skipped before a token. When the source ends in whitespace,
for example a trailing newline, the lexer reaches the end while looking for
another token and raises `LexerError` for the end-of-input character `'\0'`.

## Library use

```python
from nurogami.lexer import Lexer
from nurogami.errors import LexerError

try:
    for token in Lexer("x = 5;").tokenize():
        print(Lexer.type_to_string(token.type), token.value)
except LexerError as exc:
    print(exc)
```

- `nurogami.lexer.Lexer(source)` raises `ValueError` when `source` is empty.
- `Lexer.tokenize()` returns a list of `Token` objects. The last one is always
  an `ENDOFFILE` token whose value is `"EOF"`.
- `Lexer.type_to_string(token_type)` returns the display name of a
  `TokenType`, or `"UNKNOWN"` for anything else.
- `nurogami.token.Token` is a frozen dataclass with the fields `type` and
  `value`; `nurogami.token.TokenType` lists the token kinds.
- `nurogami.errors.LexerError` is a `RuntimeError` whose text starts with
  `Lexer Error: `; the bare message is kept in its `message` attribute.
- `nurogami.compiler` offers `print_banner()`, `file_exists(filename)`,
  `read_gami_file(filename)` (prints and returns the file's text, or prints an
  error and returns `""`), `start_compiler()` and `main()`.

## What it does not do

The package stops at the lexer. It does not parse `.gami` programs, compile
them or run them. The help text mentions `:exit` and `:run <filename>`, but the
prompt only recognises plain `exit`; `:run ...` is treated as a file name and
answered with the "not found or not a .gami file" error. The `RETURN` token
type exists but the lexer never produces it. A `.gami` file that is empty is
passed to `Lexer`, which raises `ValueError`, and the prompt stops.

## Running the tests

```
pip install ".[test]"
pytest
```