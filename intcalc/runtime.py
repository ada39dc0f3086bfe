import logging
import operator
from dataclasses import dataclass
from typing import Callable, ClassVar

from intcalc.errors import CalcError
from intcalc.parser import BinaryOperation, BinaryOperator, Expression, Number

logger = logging.getLogger(__name__)


@dataclass
class EvalError(CalcError):
    label: ClassVar[str] = "Runtime"


def truncating_div(a: int, b: int) -> int:
    # python's // floors, the calculator rounds toward zero
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


BinaryOperationImpl = Callable[[int, int], int]

binary_operation_impls: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: truncating_div,
}


def evaluate(expression: Expression) -> int:
    result = evaluate_expression(expression)
    logger.debug("evaluated to %d", result)
    return result


def evaluate_expression(expression: Expression) -> int:
    # left-deep chains are as deep as they are long, so walk with an explicit stack
    results: list[int] = []
    stack: list[tuple[Expression, bool]] = [(expression, False)]
    while stack:
        node, operands_ready = stack.pop()
        if isinstance(node, Number):
            results.append(node.value)
        elif isinstance(node, BinaryOperation):
            if not operands_ready:
                stack.append((node, True))
                stack.append((node.left, False))
                stack.append((node.right, False))
                continue
            left_res = results.pop()
            right_res = results.pop()
            if node.operator is BinaryOperator.DIV and right_res == 0:
                raise EvalError("Division by zero")
            impl = binary_operation_impls.get(node.operator)
            if impl is None:
                raise EvalError(f"Unexpected binary operator: {node.operator}")
            results.append(impl(left_res, right_res))
        else:
            raise EvalError(f"Unexpected expression type: {node}")
    return results.pop()
