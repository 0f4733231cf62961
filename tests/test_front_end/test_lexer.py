import pytest

from paramline.exceptions import CommandLineSyntaxError
from paramline.lexer import Token, TokenType, classify, tokenize, tokenize_argv


@pytest.mark.parametrize(
    "word, expected",
    [
        ("hello", TokenType.STRING),
        ("file.txt", TokenType.STRING),
        ('"quoted"', TokenType.QUOTED_STRING),
        ('name="x"', TokenType.QUOTED_STRING),
        ("42", TokenType.NUMBER),
        ("-42", TokenType.NUMBER),
        ("+1.5", TokenType.NUMBER),
        (".5", TokenType.NUMBER),
        ("1,000", TokenType.STRING),
        ("1e5", TokenType.STRING),
        ("true", TokenType.BOOLEAN),
        ("FALSE", TokenType.BOOLEAN),
        ("--name", TokenType.UNIX_IDENTIFIER),
        ("--dry-run", TokenType.UNIX_IDENTIFIER),
        ("-abc", TokenType.UNIX_FLAGGED_IDENTIFIERS),
        ("-?", TokenType.UNIX_FLAGGED_IDENTIFIERS),
        ("/flag", TokenType.WINDOWS_IDENTIFIER),
        ("/?", TokenType.WINDOWS_IDENTIFIER),
        ("/usr/bin", TokenType.STRING),
        ("-", TokenType.STRING),
        ("--", TokenType.STRING),
        ("-a1", TokenType.STRING),
        ("", TokenType.STRING),
    ],
)
def test_classify(word, expected):
    assert classify(word) is expected


def test_tokenize_switches_and_values():
    tokens = tokenize('-abc --name "hello world" /level 3')
    assert [(token.type, token.text) for token in tokens] == [
        (TokenType.UNIX_FLAGGED_IDENTIFIERS, "-abc"),
        (TokenType.UNIX_IDENTIFIER, "--name"),
        (TokenType.QUOTED_STRING, '"hello world"'),
        (TokenType.WINDOWS_IDENTIFIER, "/level"),
        (TokenType.NUMBER, "3"),
    ]
    assert [token.position for token in tokens] == [0, 5, 12, 26, 33]


def test_tokenize_empty_and_blank():
    assert tokenize("") == []
    assert tokenize("   \t ") == []


def test_tokenize_escaped_quote_does_not_close_span():
    tokens = tokenize(r'--say "a \"b\" c" next')
    assert [token.text for token in tokens] == ["--say", r'"a \"b\" c"', "next"]
    assert tokens[1].type is TokenType.QUOTED_STRING


def test_tokenize_quoted_span_inside_word():
    tokens = tokenize('key="a b"c rest')
    assert tokens == [
        Token(TokenType.QUOTED_STRING, 'key="a b"c', 0),
        Token(TokenType.STRING, "rest", 11),
    ]


def test_tokenize_unterminated_quote():
    with pytest.raises(CommandLineSyntaxError) as excinfo:
        tokenize('--name "unterminated')
    assert excinfo.value.position == 7


def test_tokenize_array():
    tokens = tokenize('[1, "a b", [true]]')
    assert [token.type for token in tokens] == [
        TokenType.LEFT_BRACKET,
        TokenType.NUMBER,
        TokenType.COMMA,
        TokenType.QUOTED_STRING,
        TokenType.COMMA,
        TokenType.LEFT_BRACKET,
        TokenType.BOOLEAN,
        TokenType.RIGHT_BRACKET,
        TokenType.RIGHT_BRACKET,
    ]


def test_tokenize_commas_and_brackets_outside_arrays_are_text():
    tokens = tokenize("a,b c]")
    assert [(token.type, token.text) for token in tokens] == [
        (TokenType.STRING, "a,b"),
        (TokenType.STRING, "c]"),
    ]


def test_tokenize_array_without_spaces():
    assert [token.text for token in tokenize("[a,b]")] == ["[", "a", ",", "b", "]"]


def test_tokenize_argv_keeps_items_whole():
    tokens = tokenize_argv(["--name", "hello world", "-v", "a,b"])
    assert tokens == [
        Token(TokenType.UNIX_IDENTIFIER, "--name", 0),
        Token(TokenType.STRING, "hello world", 1),
        Token(TokenType.UNIX_FLAGGED_IDENTIFIERS, "-v", 2),
        Token(TokenType.STRING, "a,b", 3),
    ]


def test_tokenize_argv_lexes_array_items():
    tokens = tokenize_argv(["--tags", "[1, 2]"])
    assert [(token.type, token.text, token.position) for token in tokens] == [
        (TokenType.UNIX_IDENTIFIER, "--tags", 0),
        (TokenType.LEFT_BRACKET, "[", 1),
        (TokenType.NUMBER, "1", 1),
        (TokenType.COMMA, ",", 1),
        (TokenType.NUMBER, "2", 1),
        (TokenType.RIGHT_BRACKET, "]", 1),
    ]
