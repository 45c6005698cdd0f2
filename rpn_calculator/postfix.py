from rpn_calculator.tokenizer import Token, TokenType

OPERATOR_PRECEDENCE = {
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
    TokenType.STAR: 2,
    TokenType.SLASH: 2,
    TokenType.BRACKET_OPEN: 0,
    TokenType.BRACKET_CLOSE: 0,
}


def get_op_precedence(token: Token) -> int:
    return OPERATOR_PRECEDENCE[token.type]


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Shunting-yard conversion, all operators are left-associative"""
    output: list[Token] = []
    stack: list[Token] = []
    for token in tokens:
        if token.type is TokenType.NUMBER:
            output.append(token)
        elif token.is_operator:
            while stack and get_op_precedence(stack[-1]) >= get_op_precedence(token):
                output.append(stack.pop())
            stack.append(token)
        elif token.type is TokenType.BRACKET_OPEN:
            stack.append(token)
        elif token.type is TokenType.BRACKET_CLOSE:
            while True:
                if not stack:
                    raise RuntimeError(f"Internal error: unmatched closing bracket at {token.idx}")
                top = stack.pop()
                if top.type is TokenType.BRACKET_OPEN:
                    break
                output.append(top)
        else:
            raise RuntimeError(f"Internal error: unexpected token {token}")

    while stack:
        output.append(stack.pop())

    return output
