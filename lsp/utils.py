import enum
from typing import Sequence


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def join_alternatives(items: Sequence[str]) -> str:
    """'a', 'a or b', 'a, b or c'"""
    if not items:
        return "nothing"
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " or " + items[-1]
