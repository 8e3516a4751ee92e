import argparse
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from wordcalc.calculator import format_result, try_calculate
from wordcalc.parser import dump_ast
from wordcalc.tokenizer import format_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplConfig:
    prompt: str = "Enter expression: "
    show_tokens: bool = False
    show_ast: bool = False
    allow_trailing: bool = False


def process_line(code: str, config: ReplConfig, output: Callable[[str], None] = print) -> bool:
    """Runs one already trimmed line through the pipeline and reports it. Returns False on error"""

    def show(stage: str, value: Any) -> None:
        if stage == "tokens" and config.show_tokens:
            output(f"tokens: {format_tokens(value)}")
        elif stage == "ast" and config.show_ast:
            output(f"ast: {dump_ast(value)}")

    result = try_calculate(code, allow_trailing=config.allow_trailing, on_stage=show)
    if result.value is None:
        output(str(result.error))
        return False
    output(f"Result: {format_result(result.value)}")
    return True


def run_repl(
    config: ReplConfig,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    while True:
        try:
            line = input_fn(config.prompt)
        except (EOFError, KeyboardInterrupt):
            output("")
            break

        code = line.strip()
        if not code:
            continue
        process_line(code, config, output)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordcalc",
        description="Calculator for expressions like '(3 plus 4) mul 2'",
    )
    parser.add_argument("expressions", nargs="*", help="evaluate these and exit instead of starting the shell")
    parser.add_argument("--show-tokens", action="store_true", help="print the token list of every line")
    parser.add_argument("--show-ast", action="store_true", help="print the syntax tree of every line")
    parser.add_argument("--lenient", action="store_true", help="ignore tokens after a complete expression")
    parser.add_argument("--prompt", default=ReplConfig.prompt, help="interactive prompt")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = ReplConfig(
        prompt=args.prompt,
        show_tokens=args.show_tokens,
        show_ast=args.show_ast,
        allow_trailing=args.lenient,
    )
    logger.debug("config: %s", config)

    if args.expressions:
        codes = [code.strip() for code in args.expressions]
        results = [process_line(code, config) for code in codes if code]
        return 0 if all(results) else 1

    run_repl(config, input_fn=input)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
