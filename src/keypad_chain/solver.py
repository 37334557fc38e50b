"""
Solver: sum of code complexities for a given robot chain length.

complexity(code) = minimal operator presses * numeric part of the code
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .cost import CacheStats, CostEvaluator
from .errors import ConfigError, InvalidCodeError
from .topology import NUMERIC_CONTROLLER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Code:
    """A door code such as '029A'."""

    symbols: str

    def __post_init__(self):
        if not self.symbols:
            raise InvalidCodeError("Empty code")
        bad = sorted(set(self.symbols) - NUMERIC_CONTROLLER.symbols)
        if bad:
            raise InvalidCodeError(
                f"Code {self.symbols!r} contains symbols not on the numeric keypad: {bad}"
            )

    @property
    def numeric_value(self) -> int:
        digits = "".join(ch for ch in self.symbols if ch.isdigit())
        return int(digits) if digits else 0

    def __str__(self) -> str:
        return self.symbols


def parse_code(raw: str) -> Code:
    """
    Parse one code, rejecting symbols the numeric keypad does not have.

    Raises:
        InvalidCodeError: on an empty code or an unknown symbol
    """
    return Code(raw.strip())


def parse_codes(lines: Iterable[str]) -> list[Code]:
    """Parse one code per line, skipping blank lines."""
    return [parse_code(line) for line in lines if line.strip()]


@dataclass
class CodeResult:
    code: Code
    presses: int

    @property
    def complexity(self) -> int:
        return self.presses * self.code.numeric_value


@dataclass
class SolveReport:
    """Per-code breakdown of one solve run."""

    chain_length: int
    results: list[CodeResult] = field(default_factory=list)
    cache_size: int = 0
    stats: CacheStats = field(default_factory=CacheStats)

    @property
    def total(self) -> int:
        return sum(r.complexity for r in self.results)


CodeLike = Union[str, Code]


def as_code(code: CodeLike) -> Code:
    return code if isinstance(code, Code) else parse_code(code)


def complexity(code: CodeLike, chain_length: int, evaluator: Optional[CostEvaluator] = None) -> int:
    """Complexity of a single code."""
    code = as_code(code)
    if evaluator is None:
        evaluator = CostEvaluator(chain_length)
    return evaluator.minimal_cost(code.symbols, 0) * code.numeric_value


def solve_report(codes: Iterable[CodeLike], chain_length: int, workers: int = 1) -> SolveReport:
    """
    Evaluate every code and return the per-code breakdown.

    Args:
        codes: Raw strings or parsed codes
        chain_length: Number of robot-operated directional keypads
        workers: Threads to spread codes over (one shared, locked cache)

    Raises:
        ConfigError: on a negative chain length or fewer than one worker
        InvalidCodeError: if a raw code cannot be parsed
    """
    if chain_length < 0:
        raise ConfigError(f"chain_length must be >= 0, got {chain_length}")
    if workers < 1:
        raise ConfigError(f"workers must be >= 1, got {workers}")

    parsed = [as_code(c) for c in codes]

    if workers == 1:
        evaluator = CostEvaluator(chain_length)
        presses = [evaluator.minimal_cost(c.symbols, 0) for c in parsed]
    else:
        evaluator = CostEvaluator(chain_length, lock=threading.Lock())
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="keypad") as pool:
            presses = list(pool.map(lambda c: evaluator.minimal_cost(c.symbols, 0), parsed))

    report = SolveReport(
        chain_length=chain_length,
        results=[CodeResult(code=c, presses=p) for c, p in zip(parsed, presses)],
        cache_size=evaluator.cache_size,
        stats=evaluator.stats,
    )
    for r in report.results:
        logger.debug(f"{r.code}: {r.presses} presses x {r.code.numeric_value} = {r.complexity}")
    logger.info(
        f"chain_length={chain_length}: total={report.total} "
        f"(cache entries={report.cache_size}, hit rate={report.stats.hit_rate:.1%})"
    )
    return report


def solve(codes: Iterable[CodeLike], chain_length: int, workers: int = 1) -> int:
    """Sum of complexities over all codes."""
    return solve_report(codes, chain_length, workers).total
