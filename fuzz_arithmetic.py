import math
import random
import re
import string
import warnings

from deskcalc.errors import ErrorReporter
from deskcalc.runtime import Session

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    session = Session(reporter=ErrorReporter(sink=lambda text: None))
    results = session.evaluate(code)
    if session.errors or len(results) != 1:
        return f"{session.errors} error(s), results {results}"
    return results[0]


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"(^|[-+*/(])\s*\+", code):
            continue  # unary plus is not in the grammar

        res_py = eval_py(code)
        if not isinstance(res_py, (int, float)):
            continue  # only compare inputs python accepts

        res_my = eval_my(code)
        if isinstance(res_my, float) and math.isclose(float(res_py), res_my):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
