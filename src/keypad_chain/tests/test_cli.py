"""
CLI Tests

Success Criteria:
- [x] Both parts are printed for a code file
- [x] --show-sequences prints one sequence per code
- [x] Missing file and bad codes exit non-zero
"""

import pytest


@pytest.fixture
def codes_file(tmp_path, monkeypatch):
    for name in ("KEYPAD_INPUT", "KEYPAD_SHORT_CHAIN", "KEYPAD_LONG_CHAIN", "KEYPAD_WORKERS", "KEYPAD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "input.test"
    path.write_text("029A\n980A\n179A\n456A\n379A\n")
    return path


def test_cli_prints_both_parts(codes_file, capsys):
    from keypad_chain.cli import main

    assert main(["--input", str(codes_file)]) == 0

    out = capsys.readouterr().out
    assert "The complexity of part 1 is 126384" in out
    assert "The complexity of part 2 is 154115708116294" in out


def test_cli_workers_and_chain_overrides(codes_file, capsys):
    from keypad_chain.cli import main

    assert main(["-i", str(codes_file), "--long-chain", "2", "-w", "2"]) == 0

    out = capsys.readouterr().out
    assert "The complexity of part 2 is 126384" in out


def test_cli_show_sequences(codes_file, capsys):
    from keypad_chain.cli import main

    assert main(["-i", str(codes_file), "--show-sequences"]) == 0

    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("029A: ")]
    assert len(lines) == 1
    assert len(lines[0].split(": ", 1)[1]) == 68


def test_cli_missing_file(codes_file):
    from keypad_chain.cli import main

    assert main(["-i", str(codes_file.parent / "nope.txt")]) == 1


def test_cli_bad_code(codes_file):
    from keypad_chain.cli import main

    codes_file.write_text("029A\n12B\n")
    assert main(["-i", str(codes_file)]) == 1


def test_cli_invalid_config(codes_file):
    from keypad_chain.cli import main

    assert main(["-i", str(codes_file), "--workers", "0"]) == 1
