import enum
import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, cast

from intcalc.errors import SourceError
from intcalc.lexer import Lexer, Token, TokenType
from intcalc.utils import PrintableEnum

logger = logging.getLogger(__name__)


class ParseErrorKind(PrintableEnum):
    EXPECTED_FACTOR = enum.auto()
    UNMATCHED_PARENTHESIS = enum.auto()
    TRAILING_INPUT = enum.auto()
    TOO_DEEP = enum.auto()


@dataclass
class ParseError(SourceError):
    kind: ParseErrorKind

    label: ClassVar[str] = "Parser"


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


Expression = Number | BinaryOperation


EXPR_OPERATORS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
}

TERM_OPERATORS = {
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
}


class Parser:
    """Recursive descent over

        expr   = term ( ("+"|"-") term )*
        term   = factor ( ("*"|"/") factor )*
        factor = ("+"|"-") factor | NUMBER | "(" expr ")"

    Unary minus becomes SUB(0, operand), unary plus leaves no trace in the tree.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer

    @property
    def lookahead(self) -> Token:
        return self.lexer.current

    def parse(self) -> Expression:
        self.lexer.advance()
        expr = self.parse_expr()
        token = self.lookahead
        if token.type is TokenType.RPAREN:
            raise self._error("Unmatched ')'", ParseErrorKind.UNMATCHED_PARENTHESIS, token.pos)
        if token.type is not TokenType.END:
            raise self._error(
                f"Trailing input: {self.lexer.code[token.pos:]!r}", ParseErrorKind.TRAILING_INPUT, token.pos
            )
        return expr

    def parse_expr(self) -> Expression:
        return self._parse_left_assoc(self.parse_term, EXPR_OPERATORS)

    def parse_term(self) -> Expression:
        return self._parse_left_assoc(self.parse_factor, TERM_OPERATORS)

    def parse_factor(self) -> Expression:
        token = self.lookahead
        if token.type is TokenType.PLUS:
            self.lexer.advance()
            return self.parse_factor()
        elif token.type is TokenType.MINUS:
            self.lexer.advance()
            return BinaryOperation(operator=BinaryOperator.SUB, left=Number(0), right=self.parse_factor())
        elif token.type is TokenType.NUMBER:
            self.lexer.advance()
            return Number(cast(int, token.value))
        elif token.type is TokenType.LPAREN:
            self.lexer.advance()
            expr = self.parse_expr()
            if self.lookahead.type is not TokenType.RPAREN:
                raise self._error("Unmatched '('", ParseErrorKind.UNMATCHED_PARENTHESIS, token.pos)
            self.lexer.advance()
            return expr
        else:
            found = "end of input" if token.type is TokenType.END else repr(token.lexeme)
            raise self._error(
                f"Expected a number, '(' or unary sign, found {found}", ParseErrorKind.EXPECTED_FACTOR, token.pos
            )

    def _parse_left_assoc(
        self, parse_operand: Callable[[], Expression], operators: dict[TokenType, BinaryOperator]
    ) -> Expression:
        result = parse_operand()
        while self.lookahead.type in operators:
            operator = operators[self.lookahead.type]
            self.lexer.advance()
            result = BinaryOperation(operator=operator, left=result, right=parse_operand())
        return result

    def _error(self, errmsg: str, kind: ParseErrorKind, error_char_idx: int) -> ParseError:
        return ParseError(errmsg, code=self.lexer.code, error_char_idx=error_char_idx, kind=kind)


def parse(code: str) -> Expression:
    parser = Parser(Lexer(code))
    try:
        expr = parser.parse()
    except RecursionError:
        raise ParseError(
            "Expression is nested too deeply",
            code=code,
            error_char_idx=parser.lookahead.pos,
            kind=ParseErrorKind.TOO_DEEP,
        )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("parsed %d nodes", count_nodes(expr))
    return expr


def count_nodes(expression: Expression) -> int:
    count = 0
    stack: list[Expression] = [expression]
    while stack:
        node = stack.pop()
        count += 1
        if isinstance(node, BinaryOperation):
            stack += [node.left, node.right]
    return count
