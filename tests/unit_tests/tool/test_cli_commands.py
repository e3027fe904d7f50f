"""Unit tests for the number-systems command line."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from modules.number_systems.tool import cli as cli_module


def test_one_shot_prints_result_and_steps(capsys: pytest.CaptureFixture[str]) -> None:
    """Print the result line followed by grouped steps."""
    assert cli_module.main(["1010", "2", "16"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Result (2 → 16): A"
    assert "Step 1: Convert 1010 (base 2) to decimal" in out
    assert "  Reading remainders from bottom to top: A" in out


def test_quiet_prints_only_digits(capsys: pytest.CaptureFixture[str]) -> None:
    """Print only the digits with --quiet."""
    assert cli_module.main(["255", "decimal", "hexadecimal", "--quiet"]) == 0
    assert capsys.readouterr().out == "FF\n"


def test_all_prints_every_base(capsys: pytest.CaptureFixture[str]) -> None:
    """Print one aligned line per number system."""
    assert cli_module.main(["123", "10", "--all"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Binary       1111011",
        "Octal        173",
        "Decimal      123",
        "Hexadecimal  7B",
    ]


def test_invalid_value_exits_1(capsys: pytest.CaptureFixture[str]) -> None:
    """Report invalid digits on stderr with exit status 1."""
    assert cli_module.main(["G", "16", "10"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Invalid digit 'G' for base 16" in captured.err


def test_unsupported_base_exits_1(capsys: pytest.CaptureFixture[str]) -> None:
    """Exit before converting when a base is unsupported."""
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["1", "3", "10"])
    assert excinfo.value.code == 1
    assert "Source base 3 is not supported" in capsys.readouterr().err


def test_missing_target_is_usage_error() -> None:
    """Require a target base unless --all is given."""
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["1", "2"])
    assert excinfo.value.code == 2


def test_render_steps_groups_blocks() -> None:
    """Separate step groups with one blank line."""
    lines = cli_module.render_steps(
        ["Step 1: a", "   x", "", "Step 2: b", "   y"]
    )
    assert lines == ["Step 1: a", "  x", "", "Step 2: b", "  y"]


def _answers(*values: str) -> Iterator[str]:
    yield from values


def test_interactive_converts_until_quit(capsys: pytest.CaptureFixture[str]) -> None:
    """Loop over prompts, report errors and stop on q."""
    answers = _answers("16", "2", "F", "2", "10", "9", "q")
    assert cli_module.interactive_mode(read=lambda prompt: next(answers)) == 0
    out = capsys.readouterr().out
    assert "Result (16 → 2): 1111" in out
    assert "Error: Invalid digit '9' for base 2" in out
    assert out.rstrip().endswith("Exiting.")


def test_interactive_stops_on_eof(capsys: pytest.CaptureFixture[str]) -> None:
    """Exit cleanly when input ends."""

    def read(prompt: str) -> str:
        raise EOFError

    assert cli_module.interactive_mode(read=read) == 0
    assert "Exiting." in capsys.readouterr().out
