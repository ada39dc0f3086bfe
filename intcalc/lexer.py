import enum
import logging
from dataclasses import dataclass
from typing import ClassVar, Optional

from intcalc.errors import SourceError
from intcalc.utils import PrintableEnum

logger = logging.getLogger(__name__)


@dataclass
class LexError(SourceError):
    label: ClassVar[str] = "Lexer"


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    END = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    pos: int
    value: Optional[int] = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def _is_digit(s: str) -> bool:
    # str.isdigit() also accepts superscripts and other scripts' digits
    return "0" <= s <= "9"


class Lexer:
    """Cursor over the source text holding one token of lookahead.

    `current` is the token the parser is looking at; `advance()` replaces it
    with the next one. Once the end of the text is reached every further
    `advance()` yields END again.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        self.pos = 0
        self.current = Token(type=TokenType.END, lexeme="", pos=0)

    @property
    def remaining(self) -> str:
        return self.code[self.pos :]

    def advance(self) -> Token:
        code = self.code
        i = self.pos
        while i < len(code) and code[i].isspace():
            i += 1

        if i >= len(code):
            token = Token(type=TokenType.END, lexeme="", pos=len(code))
        elif _is_digit(code[i]):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_digit(code[number_end_idx]):
                number_end_idx += 1
            lexeme = code[i:number_end_idx]
            try:
                value = int(lexeme)
            except ValueError:
                # interpreter's int_max_str_digits limit
                raise LexError(f"Number literal is too long ({len(lexeme)} digits)", code=code, error_char_idx=i)
            token = Token(type=TokenType.NUMBER, lexeme=lexeme, pos=i, value=value)
        elif code[i] in SINGLE_CHAR_TOKENS:
            token = Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], pos=i)
        else:
            raise LexError(f"Unexpected character: {code[i]!r}", code=code, error_char_idx=i)

        self.pos = token.pos + len(token.lexeme)
        self.current = token
        logger.debug("token %s at %d", token, token.pos)
        return token


def tokenize(code: str) -> list[Token]:
    lexer = Lexer(code)
    tokens = [lexer.advance()]
    while tokens[-1].type is not TokenType.END:
        tokens.append(lexer.advance())
    return tokens
