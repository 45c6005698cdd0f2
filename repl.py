from rpn_calculator.pipeline import process
from rpn_calculator.utils import CalculatorError


if __name__ == "__main__":
    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not code:
            continue

        try:
            result = process(code)
        except CalculatorError as e:
            print(e)
            continue

        print(result)
