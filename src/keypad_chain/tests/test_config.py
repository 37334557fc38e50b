"""
Config Tests

Success Criteria:
- [x] SolverConfig instantiates with defaults
- [x] Environment / .env overrides are applied
- [x] Validation reports bad settings
"""

import pytest

ENV_VARS = ["KEYPAD_INPUT", "KEYPAD_SHORT_CHAIN", "KEYPAD_LONG_CHAIN", "KEYPAD_WORKERS", "KEYPAD_LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also removes anything load_dotenv wrote
    for name in ENV_VARS:
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    return monkeypatch


def test_config_defaults():
    from keypad_chain.config import SolverConfig

    config = SolverConfig()
    assert config.short_chain == 2
    assert config.long_chain == 25
    assert config.workers == 1
    assert config.validate() == []


def test_from_env(clean_env, tmp_path):
    """KEYPAD_* variables override defaults."""
    from keypad_chain.config import SolverConfig

    clean_env.setenv("KEYPAD_INPUT", "codes.txt")
    clean_env.setenv("KEYPAD_LONG_CHAIN", "10")
    clean_env.setenv("KEYPAD_WORKERS", "3")
    clean_env.setenv("KEYPAD_LOG_LEVEL", "debug")

    config = SolverConfig.from_env(str(tmp_path / "missing.env"))
    assert config.input_path == "codes.txt"
    assert config.short_chain == 2
    assert config.long_chain == 10
    assert config.workers == 3
    assert config.log_level == "DEBUG"


def test_from_dotenv_file(clean_env, tmp_path):
    """Values in a .env file are picked up."""
    from keypad_chain.config import SolverConfig

    env_file = tmp_path / ".env"
    env_file.write_text("KEYPAD_SHORT_CHAIN=3\nKEYPAD_INPUT=door.txt\n")

    config = SolverConfig.from_env(str(env_file))
    assert config.short_chain == 3
    assert config.input_path == "door.txt"


def test_from_env_bad_integer(clean_env, tmp_path):
    from keypad_chain.config import SolverConfig
    from keypad_chain.errors import ConfigError

    clean_env.setenv("KEYPAD_WORKERS", "many")
    with pytest.raises(ConfigError):
        SolverConfig.from_env(str(tmp_path / "missing.env"))


def test_validate_reports_issues():
    from keypad_chain.config import create_config

    config = create_config(short_chain=-1, workers=0, log_level="LOUD")
    issues = config.validate()
    assert len(issues) == 3


def test_validate_sequence_depth():
    from keypad_chain.config import MAX_EXPANSION_DEPTH, create_config

    config = create_config(show_sequences=True, short_chain=MAX_EXPANSION_DEPTH + 1)
    assert config.validate()


def test_create_config_unknown_key():
    from keypad_chain.config import create_config

    with pytest.raises(ValueError):
        create_config(depth=3)


def test_summary():
    from keypad_chain.config import SolverConfig

    summary = SolverConfig().summary()
    assert "long_chain" in summary
    assert "25" in summary
