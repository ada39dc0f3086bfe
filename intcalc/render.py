from termcolor import colored

from intcalc.parser import BinaryOperation, BinaryOperator, Expression, Number

OPERATOR_SYMBOLS = {
    BinaryOperator.ADD: "+",
    BinaryOperator.SUB: "-",
    BinaryOperator.MUL: "*",
    BinaryOperator.DIV: "/",
}

OPERATOR_COLORS = {
    BinaryOperator.ADD: "blue",
    BinaryOperator.SUB: "blue",
    BinaryOperator.MUL: "red",
    BinaryOperator.DIV: "red",
}

NUMBER_COLOR = "green"


def _node_label(expression: Expression) -> str:
    if isinstance(expression, Number):
        return str(expression.value)
    return OPERATOR_SYMBOLS[expression.operator]


def render_prefix(expression: Expression, indent: int = 0) -> list[str]:
    """Node first, then its children one level (two spaces) deeper"""
    lines: list[str] = []
    stack: list[tuple[Expression, int]] = [(expression, indent)]
    while stack:
        node, depth = stack.pop()
        lines.append("  " * depth + _node_label(node))
        if isinstance(node, BinaryOperation):
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))
    return lines


def render_tree(expression: Expression, indent: int = 0, color: bool = True) -> list[str]:
    """Sideways tree: right subtree above the node, left subtree below it"""
    lines: list[str] = []
    # (node, indent, children already scheduled)
    stack: list[tuple[Expression, int, bool]] = [(expression, indent, False)]
    while stack:
        node, depth, expanded = stack.pop()
        if isinstance(node, BinaryOperation) and not expanded:
            stack.append((node.left, depth + 4, False))
            stack.append((node, depth, True))
            stack.append((node.right, depth + 4, False))
            continue

        label = _node_label(node)
        if color:
            color_name = NUMBER_COLOR if isinstance(node, Number) else OPERATOR_COLORS[node.operator]
            label = colored(label, color_name, attrs=["bold"])
        lines.append(" " * depth + label)
    return lines


def render_result(value: int) -> str:
    return f"= {value}"
