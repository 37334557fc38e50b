"""
Command-line entry point.

Usage:
    python -m keypad_chain --input input
    python -m keypad_chain -i codes.txt --show-sequences
    python -m keypad_chain --long-chain 10 --workers 4
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import SolverConfig
from .errors import KeypadError
from .sequence import shortest_sequence
from .solver import parse_codes, solve_report

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Minimal keypad presses through a chain of robots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment (or .env) defaults:
    KEYPAD_INPUT, KEYPAD_SHORT_CHAIN, KEYPAD_LONG_CHAIN,
    KEYPAD_WORKERS, KEYPAD_LOG_LEVEL
        """,
    )
    parser.add_argument("--input", "-i", help="File with one door code per line")
    parser.add_argument("--short-chain", type=int, help="Robot keypads for part 1")
    parser.add_argument("--long-chain", type=int, help="Robot keypads for part 2")
    parser.add_argument("--workers", "-w", type=int, help="Threads to spread codes over")
    parser.add_argument(
        "--show-sequences",
        action="store_true",
        help="Print one shortest press sequence per code for part 1",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Per-code debug output")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SolverConfig:
    config = SolverConfig.from_env()
    if args.input:
        config.input_path = args.input
    if args.short_chain is not None:
        config.short_chain = args.short_chain
    if args.long_chain is not None:
        config.long_chain = args.long_chain
    if args.workers is not None:
        config.workers = args.workers
    if args.show_sequences:
        config.show_sequences = True
    if args.verbose:
        config.log_level = "DEBUG"
    return config


def read_codes(path: str) -> list[str]:
    """Raw lines of the code file."""
    return Path(path).read_text().splitlines()


def run(config: SolverConfig) -> tuple[int, int]:
    """Solve both parts; returns (part 1, part 2)."""
    codes = parse_codes(read_codes(config.input_path))
    logger.info(f"Loaded {len(codes)} codes from {config.input_path}")

    part1 = solve_report(codes, config.short_chain, config.workers)
    part2 = solve_report(codes, config.long_chain, config.workers)

    if config.show_sequences:
        for code in codes:
            print(f"{code}: {shortest_sequence(code.symbols, config.short_chain)}")

    print(f"The complexity of part 1 is {part1.total}")
    print(f"The complexity of part 2 is {part2.total}")
    return part1.total, part2.total


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = build_config(args)
    except KeypadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    issues = config.validate()
    if issues:
        for issue in issues:
            logger.error(issue)
        return 1

    try:
        run(config)
    except FileNotFoundError:
        logger.error(f"Input file not found: {config.input_path}")
        return 1
    except (KeypadError, OSError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
