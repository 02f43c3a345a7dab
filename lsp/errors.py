from dataclasses import dataclass, field

from lsp.config import SOURCE_NAME
from lsp.utils import join_alternatives


@dataclass
class ParseFailure(Exception):
    """Input line does not match the grammar.

    Raised by the tokenizer and the parser, returned (not raised) by
    ``lsp.runtime.evaluate``. ``offset`` is a 0-based index into ``code``.
    """

    code: str
    offset: int
    expected: list[str]
    source_name: str = SOURCE_NAME
    found: str = field(init=False, default="")

    def __post_init__(self) -> None:
        if self.offset >= len(self.code):
            self.found = "end of input"
        else:
            self.found = repr(self.code[self.offset])

    @property
    def line(self) -> int:
        return self.code.count("\n", 0, self.offset) + 1

    @property
    def column(self) -> int:
        line_start = self.code.rfind("\n", 0, self.offset) + 1
        return self.offset - line_start + 1

    def message(self) -> str:
        return (
            f"{self.source_name}:{self.line}:{self.column}: error: "
            f"expected {join_alternatives(self.expected)} at {self.found}"
        )

    def __str__(self) -> str:
        source_line = self.code.split("\n")[self.line - 1]
        return "\n".join([self.message(), source_line, " " * (self.column - 1) + "^"])
