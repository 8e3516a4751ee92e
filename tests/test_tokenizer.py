import pytest

from wordcalc.errors import LexerError
from wordcalc.tokenizer import Token, TokenType, tokenize, untokenize

EOF_TOKEN = Token(type=TokenType.EOF)


@pytest.mark.parametrize(
    "code, expected_type",
    [
        pytest.param("plus", TokenType.PLUS),
        pytest.param("minus", TokenType.MINUS),
        pytest.param("mul", TokenType.MUL),
        pytest.param("div", TokenType.DIV),
        pytest.param("(", TokenType.LPAREN),
        pytest.param(")", TokenType.RPAREN),
    ],
)
def test_single_token(code: str, expected_type: TokenType) -> None:
    assert tokenize(code) == [Token(type=expected_type), EOF_TOKEN]


@pytest.mark.parametrize(
    "code, expected_value",
    [
        pytest.param("0", 0.0),
        pytest.param("42", 42.0),
        pytest.param("3.25", 3.25),
        pytest.param(".5", 0.5),
        pytest.param("5.", 5.0),
        pytest.param("007", 7.0),
    ],
)
def test_number(code: str, expected_value: float) -> None:
    assert tokenize(code) == [Token(type=TokenType.NUMBER, value=expected_value), EOF_TOKEN]


def test_number_followed_by_token() -> None:
    assert tokenize("12.5)") == [
        Token(type=TokenType.NUMBER, value=12.5),
        Token(type=TokenType.RPAREN),
        EOF_TOKEN,
    ]


def test_expression() -> None:
    assert tokenize("(3 plus 4)\tmul\r\n2") == [
        Token(type=TokenType.LPAREN),
        Token(type=TokenType.NUMBER, value=3.0),
        Token(type=TokenType.PLUS),
        Token(type=TokenType.NUMBER, value=4.0),
        Token(type=TokenType.RPAREN),
        Token(type=TokenType.MUL),
        Token(type=TokenType.NUMBER, value=2.0),
        EOF_TOKEN,
    ]


def test_positions() -> None:
    assert [t.position for t in tokenize("1 plus (2)")] == [0, 2, 7, 8, 9, 10]


@pytest.mark.parametrize("code", ["", "   ", "1 plus 2", "((1))"])
def test_single_trailing_eof(code: str) -> None:
    types = [t.type for t in tokenize(code)]
    assert types[-1] is TokenType.EOF
    assert types.count(TokenType.EOF) == 1


@pytest.mark.parametrize(
    "code, errmsg, position",
    [
        pytest.param("5 @ 3", "Unexpected character: '@'", 2),
        pytest.param("1 + 2", "Unexpected character: '+'", 2),
        pytest.param("5 foo 3", "Unknown identifier: 'foo'", 2),
        pytest.param("Plus", "Unknown identifier: 'Plus'", 0),
        pytest.param("1 plus2", "Unknown identifier: 'plus2'", 2),
        pytest.param("1.2.3", "Malformed number literal: '1.2.3'", 0),
        pytest.param("2 mul .", "Malformed number literal: '.'", 6),
    ],
)
def test_lexer_errors(code: str, errmsg: str, position: int) -> None:
    with pytest.raises(LexerError) as exc_info:
        tokenize(code)
    assert exc_info.value.errmsg == errmsg
    assert exc_info.value.position == position


def test_lexer_error_rendering() -> None:
    with pytest.raises(LexerError) as exc_info:
        tokenize("5 @ 3")
    assert str(exc_info.value) == "\n".join(["[Lexer error] Unexpected character: '@'", "5 @ 3", "  ^"])


def test_lexer_error_rendering_clips_long_lines() -> None:
    code = "1 plus 1 plus 1 plus 1 @ 1 plus 1 plus 1 plus 1"
    with pytest.raises(LexerError) as exc_info:
        tokenize(code)
    lines = str(exc_info.value).splitlines()
    assert lines[1] == "... 1 plus 1 @ 1 plus 1..."
    assert lines[2].index("^") == lines[1].index("@")


def test_untokenize() -> None:
    assert untokenize(tokenize("( 3 plus 4 )mul 2")) == "(3.0 plus 4.0) mul 2.0"
