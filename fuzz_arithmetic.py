import math
import random
import re
import warnings

from wordcalc.calculator import try_calculate

warnings.filterwarnings("ignore")

PY_SPELLING = {"plus": "+", "minus": "-", "mul": "*", "div": "/"}


def to_python(code: str) -> str:
    return " ".join(PY_SPELLING.get(word, word) for word in code.split(" "))


def eval_py(code: str) -> float | str:
    try:
        return float(eval(to_python(code)))
    except ZeroDivisionError:
        return "division by zero"
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    result = try_calculate(code)
    if result.error is not None:
        return str(result.error)
    assert result.value is not None
    return result.value


if __name__ == "__main__":
    alphabet = ["1", "2", "7", "0.5", "3.", ".25", "(", ")", "plus", "minus", "mul", "div"]

    def generate(length: int) -> str:
        return " ".join(random.choices(alphabet, k=length))

    while True:
        code = generate(7)

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, float) and isinstance(res_my, float) and math.isclose(res_my, res_py):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if res_py == "division by zero" and isinstance(res_my, float) and (math.isinf(res_my) or math.isnan(res_my)):
            continue
        if isinstance(res_py, float) and isinstance(res_my, str) and re.search(r"Unexpected token: (PLUS|MINUS)", res_my):
            continue  # python accepts unary signs
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
