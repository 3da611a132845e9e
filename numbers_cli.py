"""
Numbers Engine Command Line
---------------------------
Deal, solve and check numbers rounds from a terminal.

Usage (example):
    python numbers_cli.py solve 100 75 50 25 6 3 952
    python numbers_cli.py round --large 2 --seed abc --solvable
    python numbers_cli.py apply 6 - 4
    python numbers_cli.py check "(100+6)*9" 100 6 9
"""

import argparse
import logging
import sys

import config
from errors import NumbersError
from expressions import evaluate_expression
from numbers_round import generate_round, new_solvable_round, random_large_count, roll_target
from numbers_solver import compute_best_solution
from rng import create_rng
from rules import apply_operation

VALID_NUMBERS = set(config.LARGE_POOL) | set(config.SMALL_POOL)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Countdown numbers round engine.")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=config.LOG_LEVEL,
        help="Logging level (default from NUMBERS_LOG_LEVEL).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Best answer for a selection: N1 .. N6 TARGET.")
    solve.add_argument("numbers", nargs="+", type=int, help="2 to 6 selection numbers followed by the target.")

    deal = sub.add_parser("round", help="Deal a round.")
    deal.add_argument("--large", type=int, default=None, help="Large tile count 0-4 (random if omitted).")
    deal.add_argument("--seed", type=str, default=None, help="Seed to replay a round.")
    deal.add_argument("--solvable", action="store_true", help="Redeal until the target can be hit exactly.")

    step = sub.add_parser("apply", help="Apply one step: A OP B.")
    step.add_argument("a", type=int)
    step.add_argument("op")
    step.add_argument("b", type=int)

    check = sub.add_parser("check", help="Work out an answer against a selection.")
    check.add_argument("expr", help="Answer such as '(100+6)*9'.")
    check.add_argument("numbers", nargs="*", type=int, help="Selection the answer may use.")

    return parser.parse_args(argv)


def _selection(numbers) -> str:
    return " ".join(str(n) for n in numbers)


def cmd_solve(args) -> int:
    if len(args.numbers) < 3 or len(args.numbers) > 7:
        print("⚠️ Invalid input. Please provide between 2 and 6 selection numbers followed by 1 target number.")
        print("Example: solve 100 75 50 25 6 3 952")
        return 2
    *selection, target = args.numbers
    if not all(n in VALID_NUMBERS for n in selection):
        print(f"⚠️ Only numbers from {sorted(VALID_NUMBERS)} are allowed in the selection.")
        return 2

    best = compute_best_solution(selection, target)
    if best.diff == 0:
        print(f"💡 A possible solution is: {best.expr} = {best.value}")
    else:
        print(f"💡 The closest is {best.diff} away. A possible solution is: {best.expr} = {best.value}")
    return 0


def cmd_round(args) -> int:
    rng = create_rng(args.seed)
    if args.solvable:
        round_spec, target_roll, _ = new_solvable_round(rng, large_count=args.large)
    else:
        large = random_large_count(rng) if args.large is None else args.large
        round_spec = generate_round(large, rng)
        target_roll = roll_target(rng)

    if round_spec.large_count == 0:
        print("Your 6 small selection is:")
    else:
        print(f"Your {round_spec.large_count} large selection is:")
    print(f"|- {_selection(round_spec.values)} -|")
    print(f"🎯 ---> {target_roll.target} <--- 🎯")
    print(f"seed={round_spec.seed}")
    return 0


def cmd_apply(args) -> int:
    step = apply_operation(args.a, args.b, args.op)
    print(f"✅ {step.expr} = {step.value}")
    return 0


def cmd_check(args) -> int:
    step = evaluate_expression(args.expr, args.numbers or None)
    print(f"✅ {step.expr} = {step.value}")
    return 0


COMMANDS = {
    "solve": cmd_solve,
    "round": cmd_round,
    "apply": cmd_apply,
    "check": cmd_check,
}


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        return COMMANDS[args.command](args)
    except NumbersError as e:
        print(f"⚠️ Not allowed: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
