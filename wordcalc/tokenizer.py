import enum
import re
from dataclasses import dataclass, field
from typing import Optional

from wordcalc.errors import LexerError


class PrintableEnum(enum.Enum):
    """Enum printed as the bare member name"""

    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    EOF = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[float] = None
    position: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"<{self.type}>{self.value}"
        return f"<{self.type}>"


KEYWORDS = {
    "plus": TokenType.PLUS,
    "minus": TokenType.MINUS,
    "mul": TokenType.MUL,
    "div": TokenType.DIV,
}

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

WHITESPACE = " \t\n\r"


def _is_valid_in_number(s: str) -> bool:
    return "0" <= s <= "9" or s == "."


def tokenize(code: str) -> list[Token]:
    """Scans a single line into tokens, always terminated by exactly one EOF token"""
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        char = code[i]
        if _is_valid_in_number(char):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                number_end_idx += 1
            lexeme = code[i:number_end_idx]
            try:
                value = float(lexeme)
            except ValueError:
                raise LexerError(f"Malformed number literal: {lexeme!r}", code=code, position=i) from None
            tokens.append(Token(type=TokenType.NUMBER, value=value, position=i))
            i = number_end_idx
        elif char in WHITESPACE:
            i += 1
        elif char in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[char], position=i))
            i += 1
        elif char.isalpha():
            ident_end_idx = i + 1
            while ident_end_idx < len(code) and code[ident_end_idx].isalnum():
                ident_end_idx += 1
            ident = code[i:ident_end_idx]
            if ident not in KEYWORDS:
                raise LexerError(f"Unknown identifier: {ident!r}", code=code, position=i)
            tokens.append(Token(type=KEYWORDS[ident], position=i))
            i = ident_end_idx
        else:
            raise LexerError(f"Unexpected character: {char!r}", code=code, position=i)

    tokens.append(Token(type=TokenType.EOF, position=len(code)))
    return tokens


_KEYWORD_LEXEMES = {token_type: keyword for keyword, token_type in KEYWORDS.items()}


def _lexeme(token: Token) -> str:
    if token.type is TokenType.NUMBER:
        return repr(token.value)
    elif token.type is TokenType.LPAREN:
        return "("
    elif token.type is TokenType.RPAREN:
        return ")"
    elif token.type is TokenType.EOF:
        return ""
    return _KEYWORD_LEXEMES[token.type]


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(_lexeme(t) for t in tokens).strip()

    # ( 1.0 plus 2.0 ) => (1.0 plus 2.0)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result


def format_tokens(tokens: list[Token]) -> str:
    return " ".join(str(t) for t in tokens)
