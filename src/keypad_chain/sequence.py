"""
Reconstruct one concrete shortest press sequence for the operator.

Uses the evaluator's cached costs to pick, for every key transition, the
candidate path that is cheapest once re-typed up the chain, then expands that
path one layer further.
"""

from typing import Optional

from .config import MAX_EXPANSION_DEPTH
from .cost import CostEvaluator
from .errors import ConfigError
from .solver import CodeLike, as_code
from .topology import Move


def best_path(evaluator: CostEvaluator, prev: str, cur: str, depth: int) -> str:
    """Cheapest candidate path for one transition (ties: lexicographically first)."""
    candidates = sorted(evaluator.candidates(prev, cur, depth))
    if depth == evaluator.max_depth:
        return min(candidates, key=len)
    return min(candidates, key=lambda path: evaluator.minimal_cost(path, depth + 1))


def expand(sequence: str, depth: int, evaluator: CostEvaluator) -> str:
    """Operator presses that make the arm at `depth` type `sequence`."""
    out = []
    prev = Move.ACTIVATE.value
    for cur in sequence:
        path = best_path(evaluator, prev, cur, depth)
        if depth == evaluator.max_depth:
            out.append(path)
        else:
            out.append(expand(path, depth + 1, evaluator))
        prev = cur
    return "".join(out)


def shortest_sequence(code: CodeLike, chain_length: int, evaluator: Optional[CostEvaluator] = None) -> str:
    """
    One shortest operator press sequence that enters `code` on the door.

    Raises:
        ConfigError: if chain_length is negative or too long to expand sensibly
        InvalidCodeError: if the code has symbols not on the numeric keypad
    """
    code = as_code(code)
    if chain_length < 0:
        raise ConfigError(f"chain_length must be >= 0, got {chain_length}")
    if chain_length > MAX_EXPANSION_DEPTH:
        raise ConfigError(
            f"Refusing to expand a chain of {chain_length} keypads (limit {MAX_EXPANSION_DEPTH})"
        )
    if evaluator is None:
        evaluator = CostEvaluator(chain_length)
    elif evaluator.max_depth != chain_length:
        raise ConfigError(
            f"Evaluator is configured for chain length {evaluator.max_depth}, not {chain_length}"
        )
    return expand(code.symbols, 0, evaluator)
