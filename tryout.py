from wordcalc.calculator import format_result
from wordcalc.errors import LexerError, ParserError
from wordcalc.parser import dump_ast, parse
from wordcalc.runtime import evaluate
from wordcalc.tokenizer import format_tokens, tokenize, untokenize

for code in [
    "5",
    ".5",
    "3 plus 4 mul 2",
    "(3 plus 4) mul 2",
    "10 minus 2 minus 3",
    "10 div 5 div 2",
    "7 div 2",
    "1 div 0",
    "0 div 0",
    "((1 plus 2) mul (3 minus 4)) div 5",
    "5 @ 3",
    "5 foo 3",
    "1.2.3 plus 1",
    "(3 plus 4",
    "3 plus",
    "3 4",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except LexerError as e:
        print(e)
        continue

    print(f"tokens: {format_tokens(tokens)}")
    print(f"canonical: {untokenize(tokens)}")

    try:
        ast = parse(tokens, code=code)
    except ParserError as e:
        print(e)
        continue
    print(f"ast: {dump_ast(ast)}")
    print(f"result: {format_result(evaluate(ast))}")
