import logging
from typing import Callable

from lsp.errors import ParseFailure
from lsp.parser import ExprNode, Node, NumberNode, ProgramNode, parse
from lsp.value import (
    INT_MAX,
    Error,
    ErrorKind,
    Number,
    Value,
    in_int_range,
    make_error,
    make_number,
    render,
    wrap_int,
)

logger = logging.getLogger(__name__)

# digits of INT_MAX, longer literals are out of range
MAX_DIGITS = len(str(INT_MAX))


def evaluate(code: str) -> Value | ParseFailure:
    """Parse and evaluate one line. Parse failures are returned, not raised."""
    try:
        program = parse(code)
    except ParseFailure as e:
        logger.debug("Parse failure: %s", e.message())
        return e
    result = evaluate_node(program)
    logger.debug("Result: %s", result)
    return result


def evaluate_and_render(code: str) -> str:
    result = evaluate(code)
    if isinstance(result, ParseFailure):
        return str(result)
    return render(result)


def evaluate_node(node: Node) -> Value:
    if isinstance(node, NumberNode):
        # int() refuses very long digit strings, leading zeros included
        digits = node.text.lstrip("-").lstrip("0")
        if len(digits) > MAX_DIGITS:
            return make_error(ErrorKind.INVALID_NUMBER)
        x = -int(digits or "0") if node.text.startswith("-") else int(digits or "0")
        return make_number(x) if in_int_range(x) else make_error(ErrorKind.INVALID_NUMBER)
    elif isinstance(node, (ExprNode, ProgramNode)):
        op = node.operator.symbol
        acc = evaluate_node(node.operands[0])
        for operand in node.operands[1:]:
            if isinstance(acc, Error):
                break
            acc = eval_op(acc, op, evaluate_node(operand))
        return acc
    else:
        raise RuntimeError(f"Unexpected node type: {node}")


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


OPERATOR_IMPLS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def eval_op(x: Value, op: str, y: Value) -> Value:
    """Combine two operand values, an Error on either side is passed through."""
    if isinstance(x, Error):
        return x
    if isinstance(y, Error):
        return y
    if not isinstance(x, Number) or not isinstance(y, Number):
        raise RuntimeError(f"Operator {op!r} is not defined for {x.type_name()} and {y.type_name()}")

    impl = OPERATOR_IMPLS.get(op)
    if impl is None:
        return make_error(ErrorKind.INVALID_OPERATOR)
    if op == "/" and y.v == 0:
        return make_error(ErrorKind.DIVISION_BY_ZERO)
    return make_number(wrap_int(impl(x.v, y.v)))
