import random

from lsp.runtime import evaluate_and_render
from lsp.value import in_int_range, wrap_int

OPERATORS = "+-*/"


class RefError(Exception):
    pass


def eval_ref(op: str, operands: list) -> int:
    """Independent reference: C long arithmetic on nested python lists"""
    values = [eval_ref(o[0], o[1:]) if isinstance(o, list) else o for o in operands]
    acc = values[0]
    for v in values[1:]:
        if op == "+":
            acc = wrap_int(acc + v)
        elif op == "-":
            acc = wrap_int(acc - v)
        elif op == "*":
            acc = wrap_int(acc * v)
        else:
            if v == 0:
                raise RefError("Error: Division by zero")
            q = abs(acc) // abs(v)
            acc = wrap_int(q if (acc < 0) == (v < 0) else -q)
    return acc


def generate(depth: int) -> list:
    operands: list = []
    for _ in range(random.randint(1, 4)):
        if depth > 0 and random.random() < 0.3:
            operands.append(generate(depth - 1))
        else:
            operands.append(random.choice([0, 1, -1, random.randint(-1000, 1000), random.randint(-(2**70), 2**70)]))
    return [random.choice(OPERATORS), *operands]


def to_code(expr: list, top: bool = True) -> str:
    parts = [expr[0]] + [to_code(o, top=False) if isinstance(o, list) else str(o) for o in expr[1:]]
    code = " ".join(parts)
    return code if top else f"({code})"


def has_bad_number(expr: list) -> bool:
    return any(has_bad_number(o) if isinstance(o, list) else not in_int_range(o) for o in expr[1:])


if __name__ == "__main__":
    while True:
        expr = generate(depth=3)
        code = to_code(expr)

        res_my = evaluate_and_render(code)
        if has_bad_number(expr):
            # any out of range literal turns the whole result into an error
            if res_my.startswith("Error"):
                continue
            print(f"{code!r}\nexpected an error\nmy: {res_my}\n\n")
            continue
        try:
            res_ref = str(eval_ref(expr[0], expr[1:]))
        except RefError as e:
            res_ref = str(e)

        if res_ref == res_my:
            continue
        print(f"{code!r}\nref: {res_ref}\nmy: {res_my}\n\n")
