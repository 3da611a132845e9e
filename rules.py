"""
Numbers Game Rules
------------------
What a player may do to two tiles, and how many points a finished answer
earns. The same rule table (`legal_steps`) drives the solver, so the best
answer it reports is always one a player could have built.

Usage (example):
    from rules import Operation, apply_operation, score_for_diff
    step = apply_operation(6, 4, Operation.SUBTRACT)   # Step(value=2, expr='(6-4)')
    score_for_diff(3)                                  # 7
"""

from enum import Enum
from typing import NamedTuple, Optional

import config
from errors import InvalidOperation


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value


# Symbols players type, mapped onto the four operations.
OPERATION_ALIASES = {
    "+": Operation.ADD,
    "p": Operation.ADD,
    "-": Operation.SUBTRACT,
    "−": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "x": Operation.MULTIPLY,
    "×": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
    "÷": Operation.DIVIDE,
}


class Step(NamedTuple):
    value: int
    expr: str


def parse_operation(symbol) -> Operation:
    if isinstance(symbol, Operation):
        return symbol
    op = OPERATION_ALIASES.get(str(symbol).strip().lower())
    if op is None:
        raise InvalidOperation(f"unknown operation {symbol!r}")
    return op


def is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def format_expression(left: str, op: Operation, right: str) -> str:
    return f"({left}{op.symbol}{right})"


def legal_steps(a: int, b: int) -> list:
    """
    Every legal step for an unordered pair of positive operands.

    Returns (value, op, swapped) tuples; `swapped` means the step reads
    b <op> a. Addition and multiplication always apply, subtraction only
    larger minus smaller (never equal operands), division only when one
    operand divides the other exactly.
    """
    steps = [
        (a + b, Operation.ADD, False),
        (a * b, Operation.MULTIPLY, False),
    ]
    if a > b:
        steps.append((a - b, Operation.SUBTRACT, False))
    elif b > a:
        steps.append((b - a, Operation.SUBTRACT, True))
    if b and a % b == 0:
        steps.append((a // b, Operation.DIVIDE, False))
    if a and b % a == 0:
        steps.append((b // a, Operation.DIVIDE, True))
    return steps


def apply_operation(a: int, b: int, op, expr_a: Optional[str] = None, expr_b: Optional[str] = None) -> Step:
    """
    Apply one step to two tile values.

    Subtraction puts the larger operand first; division is read as a / b and
    must divide exactly. Raises InvalidOperation for anything the rules
    forbid; nothing is returned or changed in that case.
    """
    op = parse_operation(op)
    if op is Operation.DIVIDE and b == 0:
        raise InvalidOperation("cannot divide by zero")
    if not (is_positive_int(a) and is_positive_int(b)):
        raise InvalidOperation(f"operands must be positive whole numbers, got {a!r} and {b!r}")

    expr_a = str(a) if expr_a is None else expr_a
    expr_b = str(b) if expr_b is None else expr_b

    for value, step_op, swapped in legal_steps(a, b):
        if step_op is not op:
            continue
        if swapped and op is Operation.DIVIDE:
            continue
        if not is_positive_int(value):
            raise InvalidOperation(f"{a} {op.symbol} {b} does not give a positive whole number")
        left, right = (expr_b, expr_a) if swapped else (expr_a, expr_b)
        return Step(value, format_expression(left, op, right))

    if op is Operation.SUBTRACT:
        raise InvalidOperation(f"{a} - {b} would leave zero")
    raise InvalidOperation(f"{a} is not divisible by {b}")


def score_for_diff(diff: int) -> int:
    """Points for finishing `diff` away from the target."""
    if diff < 0:
        raise ValueError(f"diff must be non-negative, got {diff}")
    for max_diff, points in config.SCORE_BANDS:
        if diff <= max_diff:
            return points
    return 0
