import math
import random
import re
import string
import warnings

from rpn_calculator.pipeline import process
from rpn_calculator.utils import CalculatorError

warnings.filterwarnings("ignore")

# python accepts unary plus and negation of anything but a literal, the calculator does not
UNARY_ON_NON_LITERAL = re.compile(r"(^|[-+*/(])(\+|-[-+(])")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | CalculatorError:
    try:
        return process(code)
    except CalculatorError as e:
        return e


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/"

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"//", code):
            continue  # avoid generating int devision (10 // 3)

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(float(res_py), res_my):
            continue
        if isinstance(res_py, str) and isinstance(res_my, CalculatorError):
            continue
        if isinstance(res_my, CalculatorError) and UNARY_ON_NON_LITERAL.search(code):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
