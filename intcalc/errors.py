from dataclasses import dataclass
from typing import ClassVar

from intcalc.utils import point_at


@dataclass
class CalcError(Exception):
    errmsg: str

    label: ClassVar[str] = "Calculator"

    def __str__(self) -> str:
        return f"[{self.label} error] {self.errmsg}"


@dataclass
class UsageError(CalcError):
    label: ClassVar[str] = "Usage"


@dataclass
class SourceError(CalcError):
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([super().__str__(), *point_at(self.code, self.error_char_idx)])
