"""Exception types raised by keypad_chain."""


class KeypadError(Exception):
    """Base class for all keypad_chain errors."""


class TopologyError(KeypadError, ValueError):
    """A controller layout is malformed (duplicate, missing or misplaced key)."""


class UnknownSymbolError(KeypadError, KeyError):
    """A symbol was looked up on a controller that does not have it."""

    def __init__(self, symbol: str, controller: str):
        super().__init__(f"Unknown symbol {symbol!r} on {controller} controller")
        self.symbol = symbol
        self.controller = controller

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidCodeError(KeypadError, ValueError):
    """A code contains symbols outside the numeric controller alphabet."""


class DepthError(KeypadError, RuntimeError):
    """Cost evaluation was requested outside the configured depth range."""


class ConfigError(KeypadError, ValueError):
    """Invalid solver configuration."""
