#!/usr/bin/env python3
"""
Basic Keypad Chain Example

Walks through the pieces for the reference codes: the candidate arm paths on
the door keypad, the minimal press counts as robots are added to the chain,
and one concrete press sequence.

Usage:
    uv run python examples/basic_solve.py
"""

from pathlib import Path

from keypad_chain import (
    NUMERIC_CONTROLLER,
    CostEvaluator,
    enumerate_paths,
    parse_codes,
    shortest_sequence,
    solve,
)


def main():
    print("=" * 60)
    print("Keypad Chain Basic Example")
    print("=" * 60)

    codes = parse_codes((Path(__file__).parent / "codes.txt").read_text().splitlines())
    print(f"\nCodes: {', '.join(str(c) for c in codes)}")

    print("\nDoor keypad paths for 029A:")
    prev = "A"
    for symbol in "029A":
        paths = sorted(enumerate_paths(NUMERIC_CONTROLLER, prev, symbol))
        print(f"  {prev} -> {symbol}: {paths}")
        prev = symbol

    print("\nPresses for 029A by chain length:")
    for chain_length in range(6):
        presses = CostEvaluator(chain_length).minimal_cost("029A", 0)
        print(f"  {chain_length:2d} robots: {presses}")

    print(f"\nOne shortest sequence (2 robots):\n  {shortest_sequence('029A', 2)}")

    print("-" * 40)
    print(f"Part 1 (2 robots):  {solve(codes, 2)}")
    print(f"Part 2 (25 robots): {solve(codes, 25)}")


if __name__ == "__main__":
    main()
