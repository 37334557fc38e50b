"""
Path enumeration on a single controller.

Pure algorithmic pathfinding: breadth-first search over arm positions that
only ever moves toward the target, one full straight run at a time. Every
emitted path therefore has Manhattan-minimal length, and grouping same-direction
presses keeps each candidate cheap to re-type one layer up.
"""

from collections import deque
from functools import lru_cache

from .topology import Controller, Move, Position


def _segment_contains(cell: Position, a: Position, b: Position) -> bool:
    """True if `cell` lies on the axis-aligned segment from a to b (inclusive)."""
    return (
        min(a.row, b.row) <= cell.row <= max(a.row, b.row)
        and min(a.col, b.col) <= cell.col <= max(a.col, b.col)
    )


def _runs(pos: Position, target: Position) -> list[tuple[str, Position]]:
    """Maximal straight runs from `pos` that close one axis of the gap to `target`."""
    runs = []
    if target.col < pos.col:
        runs.append((Move.LEFT.value * (pos.col - target.col), Position(pos.row, target.col)))
    if target.row < pos.row:
        runs.append((Move.UP.value * (pos.row - target.row), Position(target.row, pos.col)))
    if target.col > pos.col:
        runs.append((Move.RIGHT.value * (target.col - pos.col), Position(pos.row, target.col)))
    if target.row > pos.row:
        runs.append((Move.DOWN.value * (target.row - pos.row), Position(target.row, pos.col)))
    return runs


# Sized for the two built-in keypads (11*11 + 5*5 pairs); other controllers
# built with build_controller share the bound instead of growing it.
PATH_CACHE_SIZE = 256


@lru_cache(maxsize=PATH_CACHE_SIZE)
def enumerate_paths(controller: Controller, from_symbol: str, to_symbol: str) -> frozenset[str]:
    """
    All minimal move sequences that press `to_symbol` starting from `from_symbol`.

    Each sequence ends with exactly one activate press. A run whose segment
    covers the forbidden cell is never queued, so the gap is unreachable by
    construction.

    Args:
        controller: Keypad to move on
        from_symbol: Key the arm currently rests on
        to_symbol: Key to press

    Returns:
        Frozen set of press strings, all of length manhattan + 1

    Raises:
        UnknownSymbolError: if either symbol is not on the controller
    """
    start = controller.position(from_symbol)
    target = controller.position(to_symbol)

    paths = set()
    queue = deque([(start, "")])
    while queue:
        pos, path = queue.popleft()
        if pos == target:
            paths.add(path + Move.ACTIVATE.value)
            continue

        for presses, next_pos in _runs(pos, target):
            if _segment_contains(controller.forbidden, pos, next_pos):
                continue
            queue.append((next_pos, path + presses))

    return frozenset(paths)
