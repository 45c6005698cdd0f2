import pytest

from rpn_calculator.tokenizer import Token, TokenType, tokenize
from rpn_calculator.validator import InvalidExpressionError, validate


@pytest.mark.parametrize(
    "code",
    [
        "1+2",
        "-1+2",
        "1+-1.1",
        "1+(2-3)",
        "(1+2)*3",
        "(1+2)-3",
        "((1))",
        "2*(3+(4-5))/6",
        # number syntax is not checked here
        "1.2.3+1",
    ],
)
def test_valid(code: str) -> None:
    tokens = tokenize(code)
    assert validate(tokens) is tokens


@pytest.mark.parametrize(
    "code, errmsg, error_token_idx",
    [
        pytest.param("", "Expression is too short", 0),
        pytest.param("1", "Expression is too short", 1),
        pytest.param("-1", "Expression is too short", 1),
        pytest.param("1+", "Expression is too short", 2),
        pytest.param("(1+2", "Unclosed bracket", 0),
        pytest.param("((1+2)", "Unclosed bracket", 0),
        pytest.param("1+2)", "Unmatched closing bracket", 3),
        pytest.param("1*/2", "Two operators in a row", 2),
        pytest.param("3(1+2)", "Opening bracket after operand", 1),
        pytest.param("-(1+2)", "Opening bracket after operand", 1),
        pytest.param("(1)(2)", "Opening bracket after closing bracket", 3),
        pytest.param("(1+2)3", "Operand after closing bracket", 5),
        pytest.param("+1+2", "Expression starts with operator '+'", 0),
        pytest.param("1+2*", "Expression ends with operator '*'", 3),
        pytest.param("(*1)+2", "Operator '*' after opening bracket", 1),
        pytest.param("(1+)*2", "Closing bracket after operator", 3),
        pytest.param("()+1", "Empty brackets", 1),
    ],
)
def test_invalid(code: str, errmsg: str, error_token_idx: int) -> None:
    with pytest.raises(InvalidExpressionError) as exc_info:
        validate(tokenize(code))
    assert exc_info.value.errmsg == errmsg
    assert exc_info.value.error_token_idx == error_token_idx


def test_two_operands_in_a_row() -> None:
    # the tokenizer merges adjacent digits, so such a sequence can only be built by hand
    tokens = [
        Token(type=TokenType.NUMBER, lexeme="1", idx=0),
        Token(type=TokenType.NUMBER, lexeme="2", idx=1),
        Token(type=TokenType.PLUS, lexeme="+", idx=2),
        Token(type=TokenType.NUMBER, lexeme="3", idx=3),
    ]
    with pytest.raises(InvalidExpressionError, match="Two operands in a row"):
        validate(tokens)


@pytest.mark.parametrize("code", ["1+2*3", "(1+2", "1"])
def test_validation_is_idempotent(code: str) -> None:
    tokens = tokenize(code)

    def outcome() -> str | None:
        try:
            validate(tokens)
        except InvalidExpressionError as e:
            return str(e)
        return None

    assert outcome() == outcome()


def test_error_message() -> None:
    with pytest.raises(InvalidExpressionError) as exc_info:
        validate(tokenize("1+2)"))
    assert str(exc_info.value) == "[Validator error] Unmatched closing bracket\n1+2)\n   ^"
