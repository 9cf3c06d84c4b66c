"""Command line entry point for the Futz compiler."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from futzc.scanner import tokenize

HELP_MESSAGE = """\
usage: futz SOURCE [options]
       futz --help

Compile a Futz source file.

options:
  -i, --include DIR...      add directories to the include search path
  -t, --output_tokens PATH  write the scanned tokens to PATH, a .txt file or
                            a directory in which tokens.txt is created"""


class UsageError(Exception):
    """Raised when the command line cannot be used."""


@dataclass
class Options:
    """Settings taken from the command line."""

    source: Path | None = None
    include_paths: list[Path] = field(default_factory=list)
    token_output: Path | None = None
    show_help: bool = False


def resolve_token_output(path: Path | str) -> Path:
    """Return the file that tokens are written to for the given path."""
    path = Path(path)
    if not path.exists():
        raise UsageError("The path provided to output the tokens is invalid")
    if path.is_dir():
        return path / "tokens.txt"
    if path.suffix == ".txt":
        return path
    raise UsageError(
        "Please provide a file with the .txt extension to be a token output"
    )


def parse_command_line(argv: Sequence[str]) -> Options:
    """Build Options from arguments that follow the program name."""
    args = list(argv)
    if not args:
        raise UsageError(
            'Please provide arguments to the compiler, if you need help, type "futz --help"'
        )
    if args[0] == "--help":
        return Options(show_help=True)

    options = Options(source=Path(args[0]))
    pending = deque(args[1:])
    while pending:
        argument = pending.popleft()
        if argument in ("--include", "-i"):
            while pending and not pending[0].startswith("-"):
                include_path = Path(pending.popleft())
                if not include_path.is_dir():
                    raise UsageError(
                        f'The path "{include_path}" is not a valid directory.'
                    )
                options.include_paths.append(include_path)
            if not options.include_paths:
                raise UsageError(
                    'Please provide one or more paths after the "--include" flag'
                )
        elif argument in ("--output_tokens", "-t"):
            if not pending:
                raise UsageError("Please provide a path to the token output file")
            options.token_output = resolve_token_output(pending.popleft())
        else:
            raise UsageError(
                f'Invalid compile flag "{argument}", type "futz --help" for instructions'
            )
    return options


def _write_tokens(path: Path, lines: list[str]) -> None:
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as out:
        out.writelines(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the compiler and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_command_line(argv)
    except UsageError as error:
        print(error)
        return 1
    if options.show_help:
        print(HELP_MESSAGE)
        return 0

    try:
        with open(
            options.source, encoding="utf-8", errors="surrogateescape", newline=""
        ) as source:
            code = source.read()
    except OSError:
        print(f'The path "{options.source}" is invalid')
        return 1

    tokens = tokenize(code)

    if options.token_output is not None:
        creating = not options.token_output.exists()
        try:
            _write_tokens(options.token_output, [f"{token}\n" for token in tokens])
        except OSError:
            if creating:
                print("Error creating token.txt in the provided path")
            else:
                print("Error opening the file provided to be the token output")
            return 1

    print("Compilation success")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())