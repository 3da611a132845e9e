"""
Expression Replay
-----------------
Reads a written numbers answer such as "(100+6)*9-2" and works it out one
step at a time under the game rules, optionally checking that it only uses
the round's tiles.
"""

import ast
import re
from collections import Counter
from typing import Optional

from errors import ExpressionError, InvalidOperation
from rules import Operation, Step, apply_operation, is_positive_int

AST_OPERATIONS = {
    ast.Add: Operation.ADD,
    ast.Sub: Operation.SUBTRACT,
    ast.Mult: Operation.MULTIPLY,
    ast.Div: Operation.DIVIDE,
}

# Single-letter names for the large tiles.
SHORTHAND = {"h": "100", "s": "75", "f": "50", "t": "25"}


def normalize_expression(expr: str) -> str:
    expr = expr.lower()
    replacements = {
        "p": "+", "−": "-", "x": "*", "×": "*", "÷": "/",
        "[": "(", "{": "(", "]": ")", "}": ")",
    }
    replacements.update(SHORTHAND)
    normalized = "".join(replacements.get(ch, ch) for ch in expr)
    return re.sub(r"\s+", "", normalized)


def evaluate_expression(expr: str, tiles: Optional[list] = None) -> Step:
    """
    Work out a written answer step by step.

    Every step must be legal on its own: no zero or negative results and no
    fractions along the way. When `tiles` is given each literal must be one
    of them, and a tile can be used at most once.

    Returns the final Step. Raises ExpressionError for text that is not a
    plain arithmetic expression or uses unavailable numbers, and
    InvalidOperation for an illegal step.
    """
    normalized = normalize_expression(expr)
    if not normalized:
        raise ExpressionError("empty expression")
    if not re.fullmatch(r"[0-9+\-*/()]+", normalized):
        raise ExpressionError(f"only numbers, + - * / and brackets are allowed in {expr!r}")
    try:
        tree = ast.parse(normalized, mode="eval")
    except SyntaxError as e:
        raise ExpressionError(f"cannot read {expr!r}") from e

    available = Counter(tiles) if tiles is not None else None

    def walk(node) -> Step:
        if isinstance(node, ast.BinOp):
            op = AST_OPERATIONS.get(type(node.op))
            if op is None:
                raise ExpressionError(f"operator {type(node.op).__name__} is not allowed")
            left = walk(node.left)
            right = walk(node.right)
            if op is Operation.SUBTRACT and left.value < right.value:
                raise InvalidOperation(f"{left.value} - {right.value} would go below zero")
            return apply_operation(left.value, right.value, op, left.expr, right.expr)
        if isinstance(node, ast.Constant):
            value = node.value
            if not is_positive_int(value):
                raise ExpressionError(f"only positive whole numbers are allowed, got {value!r}")
            if available is not None:
                if available[value] <= 0:
                    raise ExpressionError(f"{value} is not available")
                available[value] -= 1
            return Step(value, str(value))
        raise ExpressionError(f"{type(node).__name__} is not allowed in an answer")

    return walk(tree.body)
