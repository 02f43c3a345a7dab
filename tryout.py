from lsp.errors import ParseFailure
from lsp.parser import parse
from lsp.runtime import evaluate_node
from lsp.tokenizer import tokenize, untokenize
from lsp.value import render

for code in [
    "+ 1 2",
    "- 5",
    "-1 2",
    "- -1 2",
    "+ 1-2",
    "+ 1 - 2",
    "* 2 (+ 3 4) (- 10 (/ 9 3))",
    "/ 7 -2",
    "/ 1 0",
    "+ 1 (/ 1 0) 3",
    "+ 99999999999999999999 1",
    "* 9223372036854775807 2",
    "% 1 2",
    "foo",
    "(+ 1 2)",
    "",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
        print(f"tokens: {' '.join(str(t) for t in tokens)}")
        print(f"normalized: {untokenize(tokens)}")
        program = parse(code)
    except ParseFailure as e:
        print(e)
        continue

    print(f"ast: {program}")
    print(f"result: {render(evaluate_node(program))}")
