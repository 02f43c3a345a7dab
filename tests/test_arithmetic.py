import pytest

from lsp.errors import ParseFailure
from lsp.runtime import evaluate, evaluate_and_render
from lsp.value import Error, ErrorKind, Number, Value


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("+ 1 2", Number(3)),
        pytest.param("+ 1 (* 2 3)", Number(7)),
        pytest.param("- 10 3 2", Number(5)),
        pytest.param("* 2 3 4", Number(24)),
        pytest.param("* 2 (+ 3 4) (- 10 (/ 9 3))", Number(98)),
        pytest.param("+ 1 (+ 2 (+ 3 (+ 4 5)))", Number(15)),
        pytest.param("  + 1 2  ", Number(3)),
        pytest.param("+ 0 -0", Number(0)),
        # truncating division
        pytest.param("/ 7 2", Number(3)),
        pytest.param("/ -7 2", Number(-3)),
        pytest.param("/ 7 -2", Number(-3)),
        pytest.param("/ -7 -2", Number(3)),
        pytest.param("/ 100 10 5", Number(2)),
        # sign vs operator
        pytest.param("-1 2", Number(-1)),
        pytest.param("- -1 2", Number(-3)),
        pytest.param("+ 1-2", Number(-1)),
        # single operand
        pytest.param("- 5", Number(5)),
        pytest.param("+ (- 5)", Number(5)),
        pytest.param("* 3 (/ 8)", Number(24)),
        # 64-bit range
        pytest.param("+ 9223372036854775807 0", Number(9223372036854775807)),
        pytest.param("+ -9223372036854775808 0", Number(-9223372036854775808)),
        pytest.param("+ 9223372036854775807 1", Number(-9223372036854775808)),
        pytest.param("- -9223372036854775808 1", Number(9223372036854775807)),
        pytest.param("* 9223372036854775807 2", Number(-2)),
        pytest.param("/ -9223372036854775808 -1", Number(-9223372036854775808)),
        pytest.param("+ 1 " + "0" * 5000 + "7", Number(8)),
        pytest.param("+ 0 -" + "0" * 5000 + "5", Number(-5)),
        # deepest accepted nesting
        pytest.param("+ 1 " + "(+ 1 " * 200 + "1" + ")" * 200, Number(202)),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: Value) -> None:
    assert evaluate(code) == expected_ret_val


@pytest.mark.parametrize(
    "code, expected_kind",
    [
        pytest.param("/ 1 0", ErrorKind.DIVISION_BY_ZERO),
        pytest.param("/ 0 0", ErrorKind.DIVISION_BY_ZERO),
        pytest.param("+ (/ 1 0) 2", ErrorKind.DIVISION_BY_ZERO),
        pytest.param("+ 1 (/ 1 0)", ErrorKind.DIVISION_BY_ZERO),
        pytest.param("+ 1 2 (/ 1 0)", ErrorKind.DIVISION_BY_ZERO),
        pytest.param("* 2 (+ 1 (/ 5 (- 3 3)))", ErrorKind.DIVISION_BY_ZERO),
        pytest.param("+ 99999999999999999999 1", ErrorKind.INVALID_NUMBER),
        pytest.param("+ 9223372036854775808 0", ErrorKind.INVALID_NUMBER),
        pytest.param("+ -9223372036854775809 0", ErrorKind.INVALID_NUMBER),
        pytest.param("- 1 (+ 2 99999999999999999999)", ErrorKind.INVALID_NUMBER),
        pytest.param("+ 1 " + "9" * 5000, ErrorKind.INVALID_NUMBER),
        pytest.param("+ -" + "9" * 5000 + " 1", ErrorKind.INVALID_NUMBER),
        # leftmost error wins
        pytest.param("+ (/ 1 0) 99999999999999999999", ErrorKind.DIVISION_BY_ZERO),
        pytest.param("+ 1 99999999999999999999 (/ 1 0)", ErrorKind.INVALID_NUMBER),
    ],
)
def test_eval_errors(code: str, expected_kind: ErrorKind) -> None:
    assert evaluate(code) == Error(expected_kind)


@pytest.mark.parametrize(
    "code",
    [
        pytest.param("% 1 2"),
        pytest.param("foo"),
        pytest.param(""),
        pytest.param("+"),
        pytest.param("1"),
        pytest.param("99999999999999999999"),
        pytest.param("(+ 1 2)"),
        pytest.param("+ 1 - 2"),
        pytest.param("+ 1 (2 3)"),
        pytest.param("+ 1 (+ 2"),
        pytest.param("+ 1 )"),
        pytest.param("+ 1 " + "(+ 1 " * 600 + "1" + ")" * 600),
    ],
)
def test_eval_parse_failure(code: str) -> None:
    assert isinstance(evaluate(code), ParseFailure)


def test_eval_is_repeatable() -> None:
    for code in ["+ 1 (* 2 3)", "/ 1 0", "foo"]:
        assert evaluate(code) == evaluate(code)


def test_eval_continues_after_parse_failure() -> None:
    assert isinstance(evaluate("foo"), ParseFailure)
    assert evaluate("+ 1 2") == Number(3)


@pytest.mark.parametrize(
    "code, expected_output",
    [
        pytest.param("+ 1 2", "3"),
        pytest.param("- 1 2", "-1"),
        pytest.param("/ 1 0", "Error: Division by zero"),
        pytest.param("+ 99999999999999999999 1", "Error: Invalid number"),
        pytest.param("+ 1 - 2", "<stdin>:1:5: error: expected number, '(' or end of input at '-'\n+ 1 - 2\n    ^"),
    ],
)
def test_eval_and_render(code: str, expected_output: str) -> None:
    assert evaluate_and_render(code) == expected_output


def test_eval_continues_after_out_of_range_input() -> None:
    assert evaluate("+ 1 " + "9" * 5000) == Error(ErrorKind.INVALID_NUMBER)
    assert isinstance(evaluate("+ 1 " + "(+ 1 " * 600 + "1" + ")" * 600), ParseFailure)
    assert evaluate("+ 1 2") == Number(3)
