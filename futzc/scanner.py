"""Lexical scanner for Futz source code."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable, Pattern


class TokenType(Enum):
    """Category assigned to a scanned token."""

    # typing related
    WORD = auto()
    KEYWORD = auto()
    DEFAULT_IDENTIFIER = auto()
    DEFAULT_TYPE = auto()
    USER_DEFINED_IDENTIFIER = auto()
    LITERAL = auto()
    COMMENT = auto()
    SEPARATOR = auto()
    SEPARATOR_SPACE = auto()
    NUMBER = auto()

    # binary operators
    BINARY_TYPE_OPERATOR = auto()
    BINARY_BINARY_OPERATOR = auto()
    BINARY_ARITHMETIC_OPERATOR = auto()
    BINARY_ACCESS_OPERATOR = auto()
    BINARY_LOGIC_OPERATOR = auto()

    # unary operators
    UNARY_TYPE_OPERATOR = auto()
    UNARY_BINARY_OPERATOR = auto()
    UNARY_ACCESS_OPERATOR = auto()
    UNARY_LOGIC_OPERATOR = auto()
    AMBIGUOUS_ARITHMETIC_OPERATOR = auto()

    # other operators
    ASSIGNMENT_OPERATOR = auto()
    COMPARISON_OPERATOR = auto()
    POINTER_OPERATOR = auto()

    # other
    BLOCK_START = auto()
    BLOCK_END = auto()
    INVALID = auto()
    SEMANTIC_DEPENDANT = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class Token:
    """A piece of source text with its category and starting position."""

    type: TokenType
    text: str
    line: int = 0
    column: int = 0

    def matches(self, pattern: str | Pattern[str]) -> bool:
        """Return True if the whole token text matches ``pattern``."""
        return re.fullmatch(pattern, self.text) is not None

    def same_as(self, other: Token) -> bool:
        """Return True if both tokens share type, text and position."""
        return (
            self.column == other.column
            and self.line == other.line
            and self.text == other.text
            and self.type == other.type
        )

    def __str__(self) -> str:
        shown = "\\n" if self.text == "\n" else self.text
        return f'{{{self.type}, "{shown}", line: {self.line}, column: {self.column}}}'


# Rules are tried in order at the current position; the first match wins.
_REGEX_RULES: tuple[tuple[Pattern[str], TokenType], ...] = tuple(
    (re.compile(pattern, re.ASCII), token_type)
    for pattern, token_type in (
        (r"//[^\n\r]*\n|/\*[\s\S]*\*/", TokenType.COMMENT),
        (r"u8'(?:[^']|\')*'|'[^']*'", TokenType.LITERAL),
        (r"[_a-zA-Z]+[\d_a-zA-Z]*", TokenType.WORD),
        (r"0x[\da-fA-F]+|0o[0-7]+|0b[10]+|\d+\.\d+|\d+", TokenType.NUMBER),
        (r"\[ *\d* *\. *\. *=? *\d* *\]", TokenType.UNARY_ACCESS_OPERATOR),
        (
            r"\[ *[_\w]*[_\w\d]* *\. *\. *=? *[_\w]*[_\w\d]* *\]",
            TokenType.UNARY_ACCESS_OPERATOR,
        ),
        (r"[=!><]=", TokenType.COMPARISON_OPERATOR),
        (r"[+-/*%&|^]?=|<<=|>>=", TokenType.ASSIGNMENT_OPERATOR),
        (r"[&|^]|<<|>>", TokenType.BINARY_BINARY_OPERATOR),
        (r"::|\.", TokenType.BINARY_ACCESS_OPERATOR),
        (r"->", TokenType.POINTER_OPERATOR),
        (r":", TokenType.BINARY_TYPE_OPERATOR),
        (r"~", TokenType.UNARY_BINARY_OPERATOR),
        (r"[/*%]", TokenType.BINARY_ARITHMETIC_OPERATOR),
        (r"[+-]", TokenType.AMBIGUOUS_ARITHMETIC_OPERATOR),
        (r"[({\[]", TokenType.BLOCK_START),
        (r"[)}\]]", TokenType.BLOCK_END),
        (r" +", TokenType.SEPARATOR_SPACE),
        (r"[\n,;]", TokenType.SEPARATOR),
        (r"<|>", TokenType.SEMANTIC_DEPENDANT),
    )
)

KEYWORDS = frozenset({
    "var", "const", "private", "if", "else", "loop", "for", "while",
    "continue", "break", "defer", "function", "return", "type", "union",
    "enum", "self", "namespace", "import", "interface", "implement",
    "manual", "static", "initcode",
})

DEFAULT_TYPES = frozenset({
    "Integer", "Integer8", "Integer16", "Integer32", "Integer64",
    "Unsigned", "Unsigned8", "Unsigned16", "Unsigned32", "Unsigned64",
    "Size", "Pointer", "Reference", "Boolean", "Float", "Double", "Void",
    "Function", "Tuple",
})

VALUES = frozenset({"true", "false", "null"})
BINARY_LOGIC_OPERATORS = frozenset({"and", "or"})
UNARY_LOGIC_OPERATORS = frozenset({"not"})
BINARY_BINARY_OPERATORS = frozenset({"band", "bor", "bxor", "bleft", "bright"})
UNARY_BINARY_OPERATORS = frozenset({"bnot"})
UNARY_TYPE_OPERATORS = frozenset({"cast", "typeof", "sizeof", "use"})
POINTER_OPERATORS = frozenset({"address", "deref", "new", "delete"})

_WORD_TYPES: dict[str, TokenType] = {
    word: token_type
    for words, token_type in (
        (KEYWORDS, TokenType.KEYWORD),
        (DEFAULT_TYPES, TokenType.DEFAULT_TYPE),
        (VALUES, TokenType.DEFAULT_IDENTIFIER),
        (BINARY_LOGIC_OPERATORS, TokenType.BINARY_LOGIC_OPERATOR),
        (UNARY_LOGIC_OPERATORS, TokenType.UNARY_LOGIC_OPERATOR),
        (BINARY_BINARY_OPERATORS, TokenType.BINARY_BINARY_OPERATOR),
        (UNARY_BINARY_OPERATORS, TokenType.UNARY_BINARY_OPERATOR),
        (UNARY_TYPE_OPERATORS, TokenType.UNARY_TYPE_OPERATOR),
        (POINTER_OPERATORS, TokenType.POINTER_OPERATOR),
    )
    for word in words
}

_TRIMMED = frozenset({TokenType.SEPARATOR_SPACE, TokenType.COMMENT})


def resolve_words(tokens: Iterable[Token]) -> list[Token]:
    """Give every WORD token its specific category."""
    return [
        replace(
            token,
            type=_WORD_TYPES.get(token.text, TokenType.USER_DEFINED_IDENTIFIER),
        )
        if token.type is TokenType.WORD
        else token
        for token in tokens
    ]


def trim(tokens: Iterable[Token]) -> list[Token]:
    """Drop space and comment tokens.

    The token directly after a dropped one is always kept unexamined.
    """
    kept: list[Token] = []
    keep_next = False
    for token in tokens:
        if keep_next:
            kept.append(token)
            keep_next = False
        elif token.type in _TRIMMED:
            keep_next = True
        else:
            kept.append(token)
    return kept


def tokenize(code: str) -> list[Token]:
    """Split ``code`` into classified tokens, without spaces and comments."""
    tokens: list[Token] = []
    line = 1
    column = 0
    position = 0
    while position < len(code):
        for pattern, token_type in _REGEX_RULES:
            match = pattern.match(code, position)
            if match:
                text = match.group()
                break
        else:
            text = code[position]
            token_type = TokenType.INVALID
        tokens.append(Token(token_type, text, line, column))
        newlines = text.count("\n")
        if newlines:
            line += newlines
            column = len(text) - text.rfind("\n") - 1
        else:
            column += len(text)
        position += len(text)
    return trim(resolve_words(tokens))