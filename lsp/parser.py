"""Grammar of the prefix language and the syntax tree it produces.

    number   : /-?[0-9]+/
    operator : '+' | '-' | '*' | '/'
    expr     : <number> | '(' <operator> <expr>+ ')'
    program  : ^ <operator> <expr>+ $

Parentheses are not kept in the tree, an ``ExprNode`` holds the operator and
the operands directly.
"""

import logging
from dataclasses import dataclass
from typing import Union

from lsp.config import MAX_NESTING
from lsp.errors import ParseFailure
from lsp.tokenizer import OPERATOR_TOKENS, Token, TokenType, tokenize

logger = logging.getLogger(__name__)


class ParserError(ParseFailure):
    pass


@dataclass(frozen=True)
class NumberNode:
    text: str

    tag = "number"

    @property
    def children(self) -> tuple["Node", ...]:
        return ()


@dataclass(frozen=True)
class OperatorNode:
    symbol: str

    tag = "operator"

    @property
    def text(self) -> str:
        return self.symbol

    @property
    def children(self) -> tuple["Node", ...]:
        return ()


@dataclass(frozen=True)
class ExprNode:
    operator: OperatorNode
    operands: tuple["Expression", ...]

    tag = "expr"

    @property
    def children(self) -> tuple["Node", ...]:
        return (self.operator, *self.operands)


@dataclass(frozen=True)
class ProgramNode:
    operator: OperatorNode
    operands: tuple["Expression", ...]

    tag = "program"

    @property
    def children(self) -> tuple["Node", ...]:
        return (self.operator, *self.operands)


Expression = Union[NumberNode, ExprNode]
Node = Union[NumberNode, OperatorNode, ExprNode, ProgramNode]

OPERATOR_EXPECTED = ["'+'", "'-'", "'*'", "'/'"]
OPERAND_EXPECTED = ["number", "'('"]


def parse(code: str) -> ProgramNode:
    """Parse one line of input, raises a ParseFailure subclass on mismatch."""
    tokens = tokenize(code)
    program = _Parser(code, tokens).program()
    logger.debug("Parsed: %s", program)
    return program


class _Parser:
    def __init__(self, code: str, tokens: list[Token]) -> None:
        self.code = code
        self.tokens = tokens
        self.i = 0
        self.depth = 0

    def _peek(self, offset: int = 0) -> Token:
        return self.tokens[min(self.i + offset, len(self.tokens) - 1)]

    def _error(self, expected: list[str]) -> ParserError:
        return ParserError(code=self.code, offset=self._peek().pos, expected=expected)

    def program(self) -> ProgramNode:
        operator = self._operator()
        operands = self._operands(terminator=TokenType.EXPR_END, terminator_name="end of input")
        return ProgramNode(operator=operator, operands=operands)

    def _operator(self) -> OperatorNode:
        token = self._peek()
        if token.type not in OPERATOR_TOKENS:
            raise self._error(OPERATOR_EXPECTED)
        self.i += 1
        return OperatorNode(token.lexeme)

    def _operands(self, terminator: TokenType, terminator_name: str) -> tuple[Expression, ...]:
        operands = [self._expression(expected=OPERAND_EXPECTED)]
        while self._peek().type is not terminator:
            operands.append(self._expression(expected=OPERAND_EXPECTED + [terminator_name]))
        self.i += 1  # skipping terminator
        return tuple(operands)

    def _expression(self, expected: list[str]) -> Expression:
        token = self._peek()
        if token.type is TokenType.NUMBER:
            self.i += 1
            return NumberNode(token.lexeme)
        elif token.type is TokenType.MINUS:
            # a sign only when glued to the digits, "-1" but not "- 1"
            number = self._peek(1)
            if number.type is TokenType.NUMBER and number.pos == token.end:
                self.i += 2
                return NumberNode(token.lexeme + number.lexeme)
            raise self._error(expected)
        elif token.type is TokenType.BRACKET_OPEN:
            if self.depth >= MAX_NESTING:
                raise self._error([f"at most {MAX_NESTING} nested expressions"])
            self.i += 1
            self.depth += 1
            operator = self._operator()
            operands = self._operands(terminator=TokenType.BRACKET_CLOSE, terminator_name="')'")
            self.depth -= 1
            return ExprNode(operator=operator, operands=operands)
        else:
            raise self._error(expected)
