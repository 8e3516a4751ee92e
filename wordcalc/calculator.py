import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from wordcalc.errors import CalcError
from wordcalc.parser import dump_ast, parse
from wordcalc.runtime import evaluate
from wordcalc.tokenizer import format_tokens, tokenize

logger = logging.getLogger(__name__)

# Called as on_stage("tokens", tokens) and on_stage("ast", ast)
StageHook = Callable[[str, Any], None]


def calculate(code: str, allow_trailing: bool = False, on_stage: Optional[StageHook] = None) -> float:
    """Evaluates one line. Lexical and syntax errors are raised as CalcError subclasses"""
    tokens = tokenize(code)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("tokens: %s", format_tokens(tokens))
    if on_stage is not None:
        on_stage("tokens", tokens)

    ast = parse(tokens, code=code, allow_trailing=allow_trailing)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("ast: %s", dump_ast(ast))
    if on_stage is not None:
        on_stage("ast", ast)

    result = evaluate(ast)
    logger.debug("result: %r", result)
    return result


@dataclass(frozen=True)
class CalcResult:
    code: str
    value: Optional[float] = None
    error: Optional[CalcError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_calculate(code: str, allow_trailing: bool = False, on_stage: Optional[StageHook] = None) -> CalcResult:
    try:
        return CalcResult(code=code, value=calculate(code, allow_trailing=allow_trailing, on_stage=on_stage))
    except CalcError as e:
        logger.info("rejected %r: %s", code, e.errmsg)
        return CalcResult(code=code, error=e)


def format_result(value: float) -> str:
    # 11.0 => 11, -0.0 => -0, 3.5 stays 3.5
    if value.is_integer():
        return f"{value:.0f}"
    return str(value)
