from rpn_calculator.postfix import to_postfix
from rpn_calculator.runtime import CalcRuntimeError, evaluate
from rpn_calculator.tokenizer import UnexpectedTokenError, tokenize
from rpn_calculator.validator import InvalidExpressionError, validate

for code in [
    "5",
    "-1+1",
    "1+-1",
    "4+6*3",
    "(4+6)*3",
    "80225/-2",
    "7/6/2000",
    "10-2-3",
    "1+(2-3)",
    "1+.1",
    "(1+2)-3",
    "1.2.3+1",
    "1/(2-2)",
    "1+2\n*3",
    "1 + 2",
    "1&2",
    "(1+2",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except UnexpectedTokenError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        validate(tokens)
    except InvalidExpressionError as e:
        print(e)
        continue

    postfix = to_postfix(tokens)
    print(f"postfix: {' '.join(t.lexeme for t in postfix)}")

    try:
        result = evaluate(postfix)
    except CalcRuntimeError as e:
        print(e)
        continue
    print(f"result: {result}")
