#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Sequence

from modules.number_systems.core.convert import (
    ConversionResult,
    convert_number,
    convert_to_all_systems,
)
from modules.number_systems.core.steps import group_steps
from modules.number_systems.core.systems import NUMBER_SYSTEMS, parse_base

QUIT = "q"


def render_steps(steps: Sequence[str]) -> List[str]:
    lines: List[str] = []
    for index, group in enumerate(group_steps(steps)):
        if index:
            lines.append("")
        if group["title"]:
            lines.append(group["title"])
        lines.extend(f"  {detail}" for detail in group["details"])
    return lines


def render_result(result: ConversionResult, from_base: int, to_base: int) -> List[str]:
    lines = [f"Result ({from_base} → {to_base}): {result.result}", ""]
    lines.extend(render_steps(result.steps))
    return lines


def _base_or_exit(raw: str, label: str) -> int:
    base, error = parse_base(raw, label=label)
    if error or base is None:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
    return base


def run_all(value: str, from_base: int) -> int:
    result = convert_to_all_systems(value, from_base)
    if not result.is_valid:
        print(f"Error: {result.error_message}", file=sys.stderr)
        return 1
    width = max(len(system.label) for system in NUMBER_SYSTEMS)
    for system in NUMBER_SYSTEMS:
        print(f"{system.label:<{width}}  {getattr(result, system.name)}")
    return 0


def run_one(value: str, from_base: int, to_base: int, *, quiet: bool = False) -> int:
    result = convert_number(value, from_base, to_base)
    if not result.is_valid:
        print(f"Error: {result.error_message}", file=sys.stderr)
        return 1
    if quiet:
        print(result.result)
        return 0
    for line in render_result(result, from_base, to_base):
        print(line)
    return 0


def interactive_mode(read: Callable[[str], str] = input) -> int:
    print("=== Number Systems Converter (2 / 8 / 10 / 16) ===")
    print(f"Type '{QUIT}' in any field to exit.\n")

    while True:
        try:
            answers = []
            for prompt in ("Source base: ", "Target base: ", "Number: "):
                answer = read(prompt).strip()
                if answer.lower() == QUIT:
                    print("Exiting.")
                    return 0
                answers.append(answer)
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            return 0

        from_raw, to_raw, value = answers
        from_base, error = parse_base(from_raw, label="Source base")
        if error is None:
            to_base, error = parse_base(to_raw, label="Target base")
        if error is not None:
            print(f"Error: {error}\n")
            continue

        result = convert_number(value, from_base, to_base)
        if not result.is_valid:
            print(f"Error: {result.error_message}\n")
            continue
        for line in render_result(result, from_base, to_base):  # type: ignore[arg-type]
            print(line)
        print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="number-systems",
        description="Convert numbers between bases 2, 8, 10 and 16 with step-by-step solutions.",
    )
    parser.add_argument("value", nargs="?", help="Number to convert.")
    parser.add_argument("from_base", nargs="?", help="Source base (2/8/10/16 or a name).")
    parser.add_argument("to_base", nargs="?", help="Target base (2/8/10/16 or a name).")
    parser.add_argument("--all", action="store_true", help="Show the value in every base.")
    parser.add_argument("--quiet", action="store_true", help="Print only the result.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.value is None:
        return interactive_mode()
    if args.from_base is None:
        parser.error("from_base is required")

    from_base = _base_or_exit(args.from_base, "Source base")
    if args.all:
        return run_all(args.value, from_base)
    if args.to_base is None:
        parser.error("to_base is required unless --all is given")
    to_base = _base_or_exit(args.to_base, "Target base")
    return run_one(args.value, from_base, to_base, quiet=args.quiet)


if __name__ == "__main__":
    sys.exit(main())
