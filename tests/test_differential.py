"""Compare the calculator against Python's own parser on random input.

Python reads `**` and `//` as other operators and rejects leading zeros, so
inputs containing them are skipped. Everything else in the alphabet means the
same thing in both languages, apart from `/` which the oracle below truncates.
"""

import ast
import random
import re
import string
import warnings
from typing import Optional

from intcalc.calc import Failure, Success, calculate

ALPHABET = string.digits + "()+-*/ "


class Unsupported(Exception):
    pass


def _trunc_div(a: int, b: int) -> int:
    q = a // b
    if q < 0 and q * b != a:
        q += 1
    return q


PY_OPERATORS = {
    ast.Add: lambda a, b: a + b,
    ast.Sub: lambda a, b: a - b,
    ast.Mult: lambda a, b: a * b,
    ast.Div: _trunc_div,
}


def _walk(node: ast.AST) -> int:
    if isinstance(node, ast.Constant) and type(node.value) is int:
        return node.value
    if isinstance(node, ast.UnaryOp) and isinstance(node.op, (ast.UAdd, ast.USub)):
        operand = _walk(node.operand)
        return -operand if isinstance(node.op, ast.USub) else operand
    if isinstance(node, ast.BinOp) and type(node.op) in PY_OPERATORS:
        return PY_OPERATORS[type(node.op)](_walk(node.left), _walk(node.right))
    raise Unsupported(ast.dump(node))


def reference_eval(code: str) -> Optional[int]:
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            tree = ast.parse(code.strip(), mode="eval")
        return _walk(tree.body)
    except (SyntaxError, Unsupported, ZeroDivisionError):
        return None


def _read_differently_by_python(code: str) -> bool:
    return bool(re.search(r"\*\s*\*", code) or re.search(r"/\s*/", code) or re.search(r"(?<!\d)0\d", code))


def _random_expression(rng: random.Random, depth: int) -> str:
    if depth == 0 or rng.random() < 0.3:
        return str(rng.randint(0, 50))
    kind = rng.choice(["binary", "unary", "paren"])
    if kind == "binary":
        op = rng.choice("+-*/")
        return f"{_random_expression(rng, depth - 1)} {op} {_random_expression(rng, depth - 1)}"
    elif kind == "unary":
        return rng.choice("+-") + _random_expression(rng, depth - 1)
    else:
        return f"({_random_expression(rng, depth - 1)})"


def _check(code: str) -> None:
    expected = reference_eval(code)
    result = calculate(code)
    if expected is None:
        assert isinstance(result, Failure), code
    else:
        assert isinstance(result, Success), f"{code!r}: {result}"
        assert result.value == expected, code


def test_random_strings() -> None:
    rng = random.Random(20261019)
    checked = 0
    for _ in range(5000):
        code = "".join(rng.choices(ALPHABET, k=rng.randint(1, 12)))
        if _read_differently_by_python(code):
            continue
        _check(code)
        checked += 1
    assert checked > 1000


def test_random_expressions() -> None:
    rng = random.Random(42)
    for _ in range(1000):
        _check(_random_expression(rng, depth=5))
