import math
import operator
from typing import Callable

from wordcalc.parser import BinaryOperation, BinaryOperator, Expression


def ieee_div(a: float, b: float) -> float:
    """Float division that yields inf/nan on a zero divisor instead of raising"""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


BINARY_OPERATION_IMPLS: dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: ieee_div,
}


def evaluate(expression: Expression) -> float:
    """Post-order walk with an explicit stack, left operand before right"""
    pending: list[Expression | BinaryOperator] = [expression]
    values: list[float] = []
    while pending:
        item = pending.pop()
        if isinstance(item, float):
            values.append(item)
        elif isinstance(item, BinaryOperation):
            pending.extend([item.operator, item.right, item.left])
        elif isinstance(item, BinaryOperator):
            right_res = values.pop()
            left_res = values.pop()
            values.append(BINARY_OPERATION_IMPLS[item](left_res, right_res))
        else:
            raise RuntimeError(f"Unexpected expression type: {item}")
    return values[0]
