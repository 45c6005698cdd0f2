from rpn_calculator.postfix import to_postfix
from rpn_calculator.runtime import evaluate
from rpn_calculator.tokenizer import tokenize
from rpn_calculator.validator import validate


def process(code: str) -> float:
    """Evaluates the first line of ``code``, raises a CalculatorError subclass on bad input"""
    return evaluate(to_postfix(validate(tokenize(code))))
