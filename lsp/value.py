import abc
import enum
from dataclasses import dataclass

from lsp.utils import PrintableEnum

# numbers are C longs on LP64
INT_BITS = 64
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


def in_int_range(x: int) -> bool:
    return INT_MIN <= x <= INT_MAX


def wrap_int(x: int) -> int:
    """Two's complement wrap-around into [INT_MIN, INT_MAX]"""
    return (x - INT_MIN) % 2**INT_BITS + INT_MIN


class Value(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def type_name(cls) -> str:
        ...


class ErrorKind(PrintableEnum):
    DIVISION_BY_ZERO = enum.auto()
    INVALID_OPERATOR = enum.auto()
    INVALID_NUMBER = enum.auto()

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    ErrorKind.DIVISION_BY_ZERO: "Division by zero",
    ErrorKind.INVALID_OPERATOR: "Invalid operator",
    ErrorKind.INVALID_NUMBER: "Invalid number",
}


@dataclass(frozen=True)
class Number(Value):
    v: int

    @classmethod
    def type_name(cls) -> str:
        return "Number"


@dataclass(frozen=True)
class Error(Value):
    kind: ErrorKind

    @classmethod
    def type_name(cls) -> str:
        return "Error"


def make_number(x: int) -> Number:
    return Number(x)


def make_error(kind: ErrorKind) -> Error:
    return Error(kind)


def render(value: Value) -> str:
    if isinstance(value, Number):
        return str(value.v)
    elif isinstance(value, Error):
        return f"Error: {value.kind.message}"
    else:
        raise RuntimeError(f"Unexpected value type: {value!r}")
