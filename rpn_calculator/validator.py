from dataclasses import dataclass
from typing import Optional

from rpn_calculator.tokenizer import Token, TokenType, untokenize
from rpn_calculator.utils import CalculatorError, point_at

MIN_EXPRESSION_TOKENS = 3


@dataclass
class InvalidExpressionError(CalculatorError):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        error_char_idx = len(untokenize(self.tokens[: self.error_token_idx]))
        return "\n".join([f"[Validator error] {self.errmsg}", *point_at(untokenize(self.tokens), error_char_idx)])


def _check_adjacency(prev: Optional[Token], token: Token) -> Optional[str]:
    """Returns the reason ``token`` can not follow ``prev``, None if it can"""
    prev_type = prev.type if prev is not None else None
    if token.type is TokenType.NUMBER:
        if prev_type is TokenType.NUMBER:
            return "Two operands in a row"
        if prev_type is TokenType.BRACKET_CLOSE:
            return "Operand after closing bracket"
    elif token.is_operator:
        if prev is None:
            return f"Expression starts with operator {token.lexeme!r}"
        if prev.is_operator:
            return "Two operators in a row"
        if prev_type is TokenType.BRACKET_OPEN:
            return f"Operator {token.lexeme!r} after opening bracket"
    elif token.type is TokenType.BRACKET_OPEN:
        if prev_type is TokenType.NUMBER:
            return "Opening bracket after operand"
        if prev_type is TokenType.BRACKET_CLOSE:
            return "Opening bracket after closing bracket"
    elif token.type is TokenType.BRACKET_CLOSE:
        if prev_type is TokenType.BRACKET_OPEN:
            return "Empty brackets"
        if prev is not None and prev.is_operator:
            return "Closing bracket after operator"
    return None


def validate(tokens: list[Token]) -> list[Token]:
    """Returns ``tokens`` unchanged if they form a well-formed infix expression"""
    if len(tokens) < MIN_EXPRESSION_TOKENS:
        raise InvalidExpressionError("Expression is too short", tokens=tokens, error_token_idx=len(tokens))

    open_brackets: list[int] = []
    prev: Optional[Token] = None
    for i, token in enumerate(tokens):
        reason = _check_adjacency(prev, token)
        if reason is not None:
            raise InvalidExpressionError(reason, tokens=tokens, error_token_idx=i)

        if token.type is TokenType.BRACKET_OPEN:
            open_brackets.append(i)
        elif token.type is TokenType.BRACKET_CLOSE:
            if not open_brackets:
                raise InvalidExpressionError("Unmatched closing bracket", tokens=tokens, error_token_idx=i)
            open_brackets.pop()
        prev = token

    if open_brackets:
        raise InvalidExpressionError("Unclosed bracket", tokens=tokens, error_token_idx=open_brackets[-1])
    if tokens[-1].is_operator:
        raise InvalidExpressionError(
            f"Expression ends with operator {tokens[-1].lexeme!r}", tokens=tokens, error_token_idx=len(tokens) - 1
        )

    return tokens
