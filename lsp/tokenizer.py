import enum
import logging
from dataclasses import dataclass

from lsp.errors import ParseFailure
from lsp.utils import PrintableEnum

logger = logging.getLogger(__name__)


class TokenizerError(ParseFailure):
    pass


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    EXPR_END = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    pos: int

    @property
    def end(self) -> int:
        return self.pos + len(self.lexeme)

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}

OPERATOR_TOKENS = (TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH)

# ASCII only, str.isdigit() would accept things like '²'
DIGITS = "0123456789"
WHITESPACE = " \t\r\n\f\v"


def tokenize(code: str) -> list[Token]:
    """Split one input line into tokens, always terminated by EXPR_END.

    A leading '-' is never folded into the number here, the parser decides
    whether it is an operator or a sign.
    """
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if code[i] in DIGITS:
            number_end_idx = i + 1
            while number_end_idx < len(code) and code[number_end_idx] in DIGITS:
                number_end_idx += 1
            tokens.append(Token(type=TokenType.NUMBER, lexeme=code[i:number_end_idx], pos=i))
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], pos=i))
        elif code[i] in WHITESPACE:
            pass
        else:
            raise TokenizerError(
                code=code,
                offset=i,
                expected=["number", "operator", "'('", "')'"],
            )
        i += 1

    tokens.append(Token(type=TokenType.EXPR_END, lexeme="", pos=len(code)))
    logger.debug("Tokens: %s", " ".join(str(t) for t in tokens))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens if t.type is not TokenType.EXPR_END)

    # ( + 1 2 ) => (+ 1 2)
    result = result.replace("( ", "(").replace(" )", ")")
    return result
