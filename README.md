# futzc

`futzc` is the front end of a compiler for the Futz programming language. It
reads a Futz source file and splits it into tokens. It can also write those
tokens to a text file so that you can inspect them.

## Installation

```
pip install .
```

To install the test dependencies as well, run `pip install .[test]`.

## Command line

```
futz SOURCE [--include DIR [DIR ...]] [--output_tokens PATH]
futz --help
```

The source file must come first. The options that can follow it are:

- `--include` / `-i` takes one or more directories. The option reads
  arguments until it reaches one that starts with `-`. Each directory must
  exist. If none is given, the command reports an error.
- `--output_tokens` / `-t` takes the path that the token list is written to.
  The path must already exist. If it is a directory, the tokens go to
  `tokens.txt` inside it. If it is a file, it must have the `.txt` extension.

`futz --help` prints a usage summary and exits with status 0.

When the run succeeds, the command prints `Compilation success` and exits
with status 0. When an argument is invalid or the source file cannot be
read, it prints a message to standard output and exits with status 1.

The token file holds one token per line:

```
{KEYWORD, "var", line: 1, column: 4}
```

A newline token is written as `"\n"`, with a backslash and the letter n.

## Library use

```python
from futzc.scanner import tokenize, TokenType

for token in tokenize("var x: Integer = 0x1F\n"):
    print(token)

tokens = tokenize("if a >= b")
assert tokens[0].type is TokenType.KEYWORD
assert tokens[2].text == ">="
```

### `futzc.scanner`

- `tokenize(code)` returns a list of `Token` objects. At each position the
  scanner tries an ordered list of regular-expression rules, and the first
  rule that matches wins. A character that no rule matches becomes an
  `INVALID` token. After matching, `resolve_words` and then `trim` are run on
  the list.
- `Token` is a dataclass with the fields `type` (a `TokenType`), `text`,
  `line` (counted from 1) and `column` (counted from 0). `str(token)` gives
  the line format shown above.
  - `Token.matches(pattern)` returns whether the whole text matches
    `pattern`, which can be a string or a compiled pattern.
  - `Token.same_as(other)` compares type, text, line and column.
- `resolve_words(tokens)` returns a new list. In it, each `WORD` token has
  become one of `KEYWORD`, `DEFAULT_TYPE`, `DEFAULT_IDENTIFIER` (`true`,
  `false`, `null`), a word operator such as `and`, `bnot`, `sizeof` or `new`,
  or `USER_DEFINED_IDENTIFIER`. The word sets are available as `KEYWORDS`,
  `DEFAULT_TYPES`, `VALUES`, `BINARY_LOGIC_OPERATORS`,
  `UNARY_LOGIC_OPERATORS`, `BINARY_BINARY_OPERATORS`,
  `UNARY_BINARY_OPERATORS`, `UNARY_TYPE_OPERATORS` and `POINTER_OPERATORS`.
- `trim(tokens)` returns a new list without `SEPARATOR_SPACE` and `COMMENT`
  tokens. The token that comes directly after a dropped token is always
  kept, even when it is itself a space or a comment.

### `futzc.cli`

- `main(argv=None)` runs the command and returns its exit status. With no
  argument it reads `sys.argv`.
- `parse_command_line(argv)` takes the arguments that follow the program
  name and returns an `Options` value. `Options` has the fields `source`,
  `include_paths`, `token_output` and `show_help`. The function raises
  `UsageError` when an argument is invalid.
- `resolve_token_output(path)` returns the file that tokens would be written
  to for `path`. It raises `UsageError` if the path does not exist, or if it
  is a file without the `.txt` extension.

## What it does not do

Scanning is the only stage. Nothing parses the tokens, checks them or
generates code, so `Compilation success` only means that the source file was
read and scanned. Even `INVALID` tokens do not cause a failure. The include
directories are checked to exist but are not used for anything else.