"""
Keypad Chain: minimal presses through nested keypad-operating robots

An operator types on a directional keypad that steers a robot arm over another
directional keypad, and so on down the chain, until the last robot types a
code on a numeric keypad. This package computes the fewest operator presses
for each code:
- Topology: the numeric and directional keypad layouts
- Paths: every minimal arm path between two keys avoiding the gap
- Cost: memoized recursion over (depth, key transition)
- Solver: complexity sums over a list of codes
"""

from .config import SolverConfig, create_config
from .cost import CacheStats, CostEvaluator, minimal_cost
from .errors import (
    ConfigError,
    DepthError,
    InvalidCodeError,
    KeypadError,
    TopologyError,
    UnknownSymbolError,
)
from .paths import enumerate_paths
from .sequence import shortest_sequence
from .solver import Code, SolveReport, complexity, parse_code, parse_codes, solve, solve_report
from .topology import (
    DIRECTIONAL_CONTROLLER,
    NUMERIC_CONTROLLER,
    Controller,
    ControllerKind,
    Move,
    Position,
    build_controller,
    controller_for,
    walk,
)

__version__ = "0.1.0"
__all__ = [
    "SolverConfig",
    "create_config",
    "CacheStats",
    "CostEvaluator",
    "minimal_cost",
    "ConfigError",
    "DepthError",
    "InvalidCodeError",
    "KeypadError",
    "TopologyError",
    "UnknownSymbolError",
    "enumerate_paths",
    "shortest_sequence",
    "Code",
    "SolveReport",
    "complexity",
    "parse_code",
    "parse_codes",
    "solve",
    "solve_report",
    "DIRECTIONAL_CONTROLLER",
    "NUMERIC_CONTROLLER",
    "Controller",
    "ControllerKind",
    "Move",
    "Position",
    "build_controller",
    "controller_for",
    "walk",
]
