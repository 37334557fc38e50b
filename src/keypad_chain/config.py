"""
Keypad Chain Configuration

Solver settings, with defaults overridable from the environment or a .env file.
"""

import os
from dataclasses import dataclass, fields

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

# Expanded press sequences grow roughly 2.5x per layer; beyond this they stop
# being something a person would want printed.
MAX_EXPANSION_DEPTH = 4

ENV_PREFIX = "KEYPAD_"


@dataclass
class SolverConfig:
    """Settings for one run over a list of door codes."""

    input_path: str = "input"

    # Part 1: two robots on directional keypads; part 2: twenty-five
    short_chain: int = 2
    long_chain: int = 25

    workers: int = 1
    show_sequences: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "SolverConfig":
        """Build a config from KEYPAD_* variables (loading .env first)."""
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        config = cls()

        input_path = os.getenv(f"{ENV_PREFIX}INPUT")
        if input_path:
            config.input_path = input_path
        config.short_chain = _env_int("SHORT_CHAIN", config.short_chain)
        config.long_chain = _env_int("LONG_CHAIN", config.long_chain)
        config.workers = _env_int("WORKERS", config.workers)
        config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", config.log_level).upper()
        return config

    def validate(self) -> list[str]:
        """Return a list of configuration problems (empty if valid)."""
        issues = []
        if self.short_chain < 0:
            issues.append(f"short_chain must be >= 0, got {self.short_chain}")
        if self.long_chain < 0:
            issues.append(f"long_chain must be >= 0, got {self.long_chain}")
        if self.workers < 1:
            issues.append(f"workers must be >= 1, got {self.workers}")
        if self.show_sequences and self.short_chain > MAX_EXPANSION_DEPTH:
            issues.append(
                f"show_sequences needs short_chain <= {MAX_EXPANSION_DEPTH}, got {self.short_chain}"
            )
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            issues.append(f"Unknown log level: {self.log_level}")
        return issues

    def summary(self) -> str:
        lines = ["Keypad Chain Configuration"]
        for f in fields(self):
            lines.append(f"  {f.name:15s}: {getattr(self, f.name)}")
        return "\n".join(lines)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


# Convenience function
def create_config(**overrides) -> SolverConfig:
    """Create config with optional overrides."""
    config = SolverConfig()

    for key, value in overrides.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            raise ValueError(f"Unknown config key: {key}")

    return config
