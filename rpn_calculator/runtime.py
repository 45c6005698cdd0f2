import math
import operator
from dataclasses import dataclass
from typing import Callable

from rpn_calculator.tokenizer import Token, TokenType
from rpn_calculator.utils import CalculatorError


@dataclass
class CalcRuntimeError(CalculatorError):
    errmsg: str
    token: Token

    def __str__(self) -> str:
        return f"[Runtime error] {self.errmsg} (at char {self.token.idx})"


class NumberParseError(CalcRuntimeError):
    pass


class DivisionByZeroError(CalcRuntimeError):
    pass


class InvalidOperationError(CalcRuntimeError):
    pass


BinaryOperationImpl = Callable[[float, float], float]

BINARY_OPERATIONS: dict[TokenType, tuple[str, BinaryOperationImpl]] = {
    TokenType.PLUS: ("Addition", operator.add),
    TokenType.MINUS: ("Subtraction", operator.sub),
    TokenType.STAR: ("Multiplication", operator.mul),
    TokenType.SLASH: ("Division", operator.truediv),
}


def parse_number(token: Token) -> float:
    try:
        value = float(token.lexeme)
    except ValueError:
        raise NumberParseError(f"Invalid number literal {token.lexeme!r}", token=token) from None
    if not math.isfinite(value):
        raise NumberParseError(f"Number literal {token.lexeme!r} is out of range", token=token)
    return value


def get_binary_operation(token: Token) -> tuple[str, BinaryOperationImpl]:
    operation = BINARY_OPERATIONS.get(token.type)
    if operation is None:
        raise InvalidOperationError(f"{token.type} is not a binary operator", token=token)
    return operation


def evaluate(postfix: list[Token]) -> float:
    """Evaluates tokens in postfix order, the right operand is the one pushed last"""
    stack: list[float] = []
    for token in postfix:
        if token.type is TokenType.NUMBER:
            stack.append(parse_number(token))
            continue

        op_name, impl = get_binary_operation(token)
        if len(stack) < 2:
            raise RuntimeError(f"Internal error: not enough operands for {token}")
        b = stack.pop()
        a = stack.pop()
        if token.type is TokenType.SLASH and b == 0:
            raise DivisionByZeroError(f"{op_name} by zero", token=token)
        stack.append(impl(a, b))

    if len(stack) != 1:
        raise RuntimeError(f"Internal error: {len(stack)} values left after evaluation, expected 1")
    return stack[0]
