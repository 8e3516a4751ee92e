import enum
from dataclasses import dataclass

from wordcalc.errors import ParserError
from wordcalc.tokenizer import PrintableEnum, Token, TokenType


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


@dataclass
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


Expression = float | BinaryOperation


ADDITIVE_OPERATORS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
}

MULTIPLICATIVE_OPERATORS = {
    TokenType.MUL: BinaryOperator.MUL,
    TokenType.DIV: BinaryOperator.DIV,
}


def parse(tokens: list[Token], code: str = "", allow_trailing: bool = False) -> Expression:
    """Builds the AST for one expression.

    Grammar, lowest precedence first:

        term    : factor ((PLUS | MINUS) factor)*
        factor  : primary ((MUL | DIV) primary)*
        primary : NUMBER | LPAREN term RPAREN

    Repeated operators on one level fold into a left-leaning chain, so
    "10 minus 2 minus 3" is (10 - 2) - 3.

    Unless ``allow_trailing`` is set, the expression must be followed directly
    by the EOF token. ``code`` is the source line and is only used for error
    reports.
    """
    if not tokens or tokens[-1].type is not TokenType.EOF:
        raise ParserError("Token stream is not terminated by EOF", code=code, position=len(code))
    try:
        expr, i = _consume_term(tokens, 0, code)
    except RecursionError:
        raise ParserError("Expression nested too deeply", code=code) from None
    if not allow_trailing and tokens[i].type is not TokenType.EOF:
        raise ParserError(f"Unexpected trailing token: {tokens[i].type}", code=code, position=tokens[i].position)
    return expr


def _consume_term(tokens: list[Token], i: int, code: str) -> tuple[Expression, int]:
    result, i = _consume_factor(tokens, i, code)
    while tokens[i].type in ADDITIVE_OPERATORS:
        operator = ADDITIVE_OPERATORS[tokens[i].type]
        right, i = _consume_factor(tokens, i + 1, code)
        result = BinaryOperation(operator=operator, left=result, right=right)
    return result, i


def _consume_factor(tokens: list[Token], i: int, code: str) -> tuple[Expression, int]:
    result, i = _consume_primary(tokens, i, code)
    while tokens[i].type in MULTIPLICATIVE_OPERATORS:
        operator = MULTIPLICATIVE_OPERATORS[tokens[i].type]
        right, i = _consume_primary(tokens, i + 1, code)
        result = BinaryOperation(operator=operator, left=result, right=right)
    return result, i


def _consume_primary(tokens: list[Token], i: int, code: str) -> tuple[Expression, int]:
    first = tokens[i]
    if first.type is TokenType.NUMBER:
        if first.value is None:
            raise ParserError("Number token without a value", code=code, position=first.position)
        return first.value, i + 1
    elif first.type is TokenType.LPAREN:
        inner, i = _consume_term(tokens, i + 1, code)
        i = _expect(tokens, i, TokenType.RPAREN, code)
        return inner, i
    else:
        raise ParserError(f"Unexpected token: {first.type}", code=code, position=first.position)


def _expect(tokens: list[Token], i: int, expected: TokenType, code: str) -> int:
    """Consumes the current token if it is of the expected type"""
    found = tokens[i]
    if found.type is not expected:
        raise ParserError(f"Expected {expected}, found {found.type}", code=code, position=found.position)
    return i + 1


def dump_ast(expression: Expression) -> str:
    """Same text as the dataclass repr, built without recursion so deep chains can be printed"""
    parts: list[str] = []
    stack: list[str | Expression] = [expression]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, BinaryOperation):
            stack.extend([")", item.right, ", right=", item.left, f"BinaryOperation(operator={item.operator}, left="][::-1])
        else:
            parts.append(repr(item))
    return "".join(parts)
