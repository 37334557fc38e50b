"""
Controller topology: the two keypad layouts and the grid primitives they use.

Layouts are written as row strings where a space marks the single forbidden
cell (the gap no robot arm may ever hover over). Positions are (row, col),
row 0 at the top.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple

import numpy as np

from .errors import TopologyError, UnknownSymbolError

GAP = " "


class Position(NamedTuple):
    row: int
    col: int


class Move(str, Enum):
    """A single press on a directional controller."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"
    ACTIVATE = "A"


# (drow, dcol) for each movement press
DELTAS = {
    Move.UP.value: (-1, 0),
    Move.DOWN.value: (1, 0),
    Move.LEFT.value: (0, -1),
    Move.RIGHT.value: (0, 1),
}


class ControllerKind(Enum):
    NUMERIC = "numeric"
    DIRECTIONAL = "directional"


@dataclass(frozen=True, eq=False)
class Controller:
    """Immutable keypad: symbol -> position plus the one forbidden cell."""

    kind: ControllerKind
    keys: Mapping[str, Position]
    forbidden: Position
    shape: tuple[int, int]  # (rows, cols)

    @property
    def symbols(self) -> frozenset[str]:
        return frozenset(self.keys)

    def position(self, symbol: str) -> Position:
        try:
            return self.keys[symbol]
        except KeyError:
            raise UnknownSymbolError(symbol, self.kind.value) from None

    def in_bounds(self, pos: Position) -> bool:
        rows, cols = self.shape
        return 0 <= pos.row < rows and 0 <= pos.col < cols

    def __repr__(self) -> str:
        return f"Controller({self.kind.value}, {len(self.keys)} keys, forbidden={tuple(self.forbidden)})"


def build_controller(kind: ControllerKind, rows: Iterable[str], alphabet: str) -> Controller:
    """
    Build and validate a controller from its row strings.

    Args:
        kind: Which controller variant this layout is
        rows: Layout rows, top to bottom; a space is the forbidden cell
        alphabet: Exact set of symbols the layout must contain

    Raises:
        TopologyError: if the layout is ragged, has other than one gap,
            repeats a symbol, or does not match the alphabet
    """
    rows = list(rows)
    if not rows or len({len(r) for r in rows}) != 1:
        raise TopologyError(f"{kind.value} layout must be a non-empty rectangle: {rows!r}")

    grid = np.array([list(r) for r in rows])

    gaps = np.argwhere(grid == GAP)
    if len(gaps) != 1:
        raise TopologyError(f"{kind.value} layout needs exactly one forbidden cell, found {len(gaps)}")
    forbidden = Position(int(gaps[0][0]), int(gaps[0][1]))

    keys: dict[str, Position] = {}
    for symbol in np.unique(grid):
        if symbol == GAP:
            continue
        found = np.argwhere(grid == symbol)
        if len(found) > 1:
            raise TopologyError(f"Symbol {symbol!r} appears {len(found)} times on {kind.value} layout")
        keys[str(symbol)] = Position(int(found[0][0]), int(found[0][1]))

    missing = set(alphabet) - set(keys)
    extra = set(keys) - set(alphabet)
    if missing or extra:
        raise TopologyError(
            f"{kind.value} layout does not match alphabet {alphabet!r}: "
            f"missing={sorted(missing)} extra={sorted(extra)}"
        )
    if Move.ACTIVATE.value not in keys:
        raise TopologyError(f"{kind.value} layout has no activate key")

    return Controller(
        kind=kind,
        keys=MappingProxyType(keys),
        forbidden=forbidden,
        shape=(grid.shape[0], grid.shape[1]),
    )


NUMERIC_ALPHABET = "0123456789A"
DIRECTIONAL_ALPHABET = "^v<>A"

NUMERIC_CONTROLLER = build_controller(
    ControllerKind.NUMERIC,
    ["789", "456", "123", " 0A"],
    NUMERIC_ALPHABET,
)

DIRECTIONAL_CONTROLLER = build_controller(
    ControllerKind.DIRECTIONAL,
    [" ^A", "<v>"],
    DIRECTIONAL_ALPHABET,
)

_CONTROLLERS = {
    ControllerKind.NUMERIC: NUMERIC_CONTROLLER,
    ControllerKind.DIRECTIONAL: DIRECTIONAL_CONTROLLER,
}


def controller_for(kind: ControllerKind) -> Controller:
    return _CONTROLLERS[kind]


def manhattan_distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Manhattan distance between two points."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def walk(controller: Controller, start_symbol: str, moves: str) -> list[Position]:
    """
    Replay a move sequence and return every position the arm occupies.

    The starting position is included. Activate presses do not move the arm.
    Raises ValueError if a move leaves the grid or is not a known press.
    """
    pos = controller.position(start_symbol)
    visited = [pos]
    for press in moves:
        if press == Move.ACTIVATE.value:
            continue
        if press not in DELTAS:
            raise ValueError(f"Not a directional press: {press!r}")
        drow, dcol = DELTAS[press]
        pos = Position(pos.row + drow, pos.col + dcol)
        if not controller.in_bounds(pos):
            raise ValueError(f"Move {press!r} leaves the {controller.kind.value} controller at {tuple(pos)}")
        visited.append(pos)
    return visited
