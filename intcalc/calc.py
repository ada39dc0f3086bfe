from dataclasses import dataclass
from typing import Optional

from intcalc.errors import CalcError
from intcalc.parser import Expression, parse
from intcalc.runtime import evaluate


@dataclass(frozen=True)
class Success:
    expression: Expression
    value: Optional[int]


@dataclass(frozen=True)
class Failure:
    error: CalcError

    @property
    def kind(self) -> str:
        return type(self.error).__name__


CalcResult = Success | Failure


def calculate(code: str, evaluate_result: bool = True) -> CalcResult:
    """Parse and (unless evaluate_result is off) evaluate code without raising.

    Lexer, parser and runtime errors come back as Failure; the first error
    ends the run, no partial tree is returned.
    """
    try:
        expression = parse(code)
        value = evaluate(expression) if evaluate_result else None
    except CalcError as e:
        return Failure(e)
    return Success(expression=expression, value=value)
