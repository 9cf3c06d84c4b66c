import pytest

from futzc.scanner import Token, TokenType, resolve_words, tokenize, trim


@pytest.mark.parametrize(
    "word, expected",
    [
        ("var", TokenType.KEYWORD),
        ("initcode", TokenType.KEYWORD),
        ("Integer", TokenType.DEFAULT_TYPE),
        ("Tuple", TokenType.DEFAULT_TYPE),
        ("true", TokenType.DEFAULT_IDENTIFIER),
        ("null", TokenType.DEFAULT_IDENTIFIER),
        ("and", TokenType.BINARY_LOGIC_OPERATOR),
        ("not", TokenType.UNARY_LOGIC_OPERATOR),
        ("band", TokenType.BINARY_BINARY_OPERATOR),
        ("bnot", TokenType.UNARY_BINARY_OPERATOR),
        ("cast", TokenType.UNARY_TYPE_OPERATOR),
        ("new", TokenType.POINTER_OPERATOR),
        ("foo_1", TokenType.USER_DEFINED_IDENTIFIER),
    ],
)
def test_words_are_classified(word, expected):
    assert tokenize(word) == [Token(expected, word, 1, 0)]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("==", TokenType.COMPARISON_OPERATOR),
        ("!=", TokenType.COMPARISON_OPERATOR),
        ("+=", TokenType.ASSIGNMENT_OPERATOR),
        ("=", TokenType.ASSIGNMENT_OPERATOR),
        ("<<=", TokenType.ASSIGNMENT_OPERATOR),
        ("<<", TokenType.BINARY_BINARY_OPERATOR),
        ("&", TokenType.BINARY_BINARY_OPERATOR),
        ("::", TokenType.BINARY_ACCESS_OPERATOR),
        (".", TokenType.BINARY_ACCESS_OPERATOR),
        ("->", TokenType.POINTER_OPERATOR),
        (":", TokenType.BINARY_TYPE_OPERATOR),
        ("~", TokenType.UNARY_BINARY_OPERATOR),
        ("*", TokenType.BINARY_ARITHMETIC_OPERATOR),
        ("-", TokenType.AMBIGUOUS_ARITHMETIC_OPERATOR),
        ("(", TokenType.BLOCK_START),
        ("]", TokenType.BLOCK_END),
        ("<", TokenType.SEMANTIC_DEPENDANT),
        (";", TokenType.SEPARATOR),
        ("[1..=5]", TokenType.UNARY_ACCESS_OPERATOR),
        ("[a .. b]", TokenType.UNARY_ACCESS_OPERATOR),
        ("0x1F", TokenType.NUMBER),
        ("0b101", TokenType.NUMBER),
        ("3.14", TokenType.NUMBER),
        ("'hi'", TokenType.LITERAL),
        ("u8'x'", TokenType.LITERAL),
        ("@", TokenType.INVALID),
    ],
)
def test_single_token_inputs(text, expected):
    assert tokenize(text) == [Token(expected, text, 1, 0)]


def test_spaces_are_removed():
    tokens = tokenize("x += 1")
    assert [t.text for t in tokens] == ["x", "+=", "1"]
    assert [t.type for t in tokens] == [
        TokenType.USER_DEFINED_IDENTIFIER,
        TokenType.ASSIGNMENT_OPERATOR,
        TokenType.NUMBER,
    ]


def test_line_and_column_after_newline():
    tokens = tokenize("a\nb")
    assert [(t.text, t.line, t.column) for t in tokens] == [
        ("a", 1, 0),
        ("\n", 1, 1),
        ("b", 2, 0),
    ]


@pytest.mark.parametrize("code", ["var  x: Integer = 5;", "if (a<b) { c = d }", "a  @  b"])
def test_columns_point_at_token_text(code):
    for token in tokenize(code):
        assert code[token.column:].startswith(token.text)


@pytest.mark.parametrize(
    "code",
    ["x=1;", "foo.bar::baz(1,2)", "a<b>c", "[0..5]", "'lit'\n0o17", "@$?"],
)
def test_texts_reassemble_source_without_spaces(code):
    assert "".join(t.text for t in tokenize(code)) == code


def test_leading_comment_is_dropped():
    tokens = tokenize("/* note */y")
    assert [t.text for t in tokens] == ["y"]


def test_line_comment_consumes_newline():
    tokens = tokenize("// note\nx")
    assert [t.text for t in tokens] == ["x"]
    assert tokens[0].line == 2


def test_trim_keeps_token_following_a_removed_one():
    tokens = [
        Token(TokenType.SEPARATOR_SPACE, " "),
        Token(TokenType.COMMENT, "// c\n"),
        Token(TokenType.SEPARATOR_SPACE, " "),
        Token(TokenType.NUMBER, "1"),
    ]
    assert [t.text for t in trim(tokens)] == ["// c\n", "1"]


def test_resolve_words_only_changes_words():
    tokens = [Token(TokenType.WORD, "loop"), Token(TokenType.LITERAL, "loop")]
    resolved = resolve_words(tokens)
    assert [t.type for t in resolved] == [TokenType.KEYWORD, TokenType.LITERAL]


def test_token_str_escapes_newline():
    token = Token(TokenType.SEPARATOR, "\n", 1, 4)
    assert str(token) == '{SEPARATOR, "\\n", line: 1, column: 4}'


def test_token_str_plain():
    token = Token(TokenType.KEYWORD, "var", 1, 0)
    assert str(token) == '{KEYWORD, "var", line: 1, column: 0}'


def test_matches_uses_whole_text():
    token = Token(TokenType.NUMBER, "123")
    assert token.matches(r"\d+")
    assert not token.matches(r"\d")


def test_same_as_compares_all_fields():
    token = Token(TokenType.NUMBER, "1", 3, 2)
    assert token.same_as(Token(TokenType.NUMBER, "1", 3, 2))
    assert not token.same_as(Token(TokenType.NUMBER, "1", 3, 1))
    assert not token.same_as(Token(TokenType.LITERAL, "1", 3, 2))