import enum
import string
from dataclasses import dataclass

from rpn_calculator.utils import CalculatorError, PrintableEnum, point_at


@dataclass
class UnexpectedTokenError(CalculatorError):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", *point_at(self.code, self.error_char_idx)])


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


BINARY_OPERATORS = frozenset({TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH})

# types after which a "-" is a binary minus rather than the sign of a literal
OPERAND_ENDS = frozenset({TokenType.NUMBER, TokenType.BRACKET_CLOSE})


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    idx: int = 0

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"

    @property
    def is_operator(self) -> bool:
        return self.type in BINARY_OPERATORS


def _is_valid_in_number(s: str) -> bool:
    return s in string.digits or s == "."


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def _signs_literal(tokens: list[Token]) -> bool:
    return not tokens or tokens[-1].type not in OPERAND_ENDS


def tokenize(code: str) -> list[Token]:
    """Splits the first line of ``code`` into tokens, number syntax is checked later"""
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        char = code[i]
        if char == "\n":
            break
        elif _is_valid_in_number(char) or (char == "-" and _signs_literal(tokens)):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                number_end_idx += 1
            tokens.append(Token(type=TokenType.NUMBER, lexeme=code[i:number_end_idx], idx=i))
            i = number_end_idx - 1  # to account for += 1 later
        elif char in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[char], lexeme=char, idx=i))
        else:
            raise UnexpectedTokenError(f"Unexpected character: {char!r}", code=code, error_char_idx=i)
        i += 1

    return tokens


def untokenize(tokens: list[Token]) -> str:
    return "".join(t.lexeme for t in tokens)
