"""Tests for the dieroll command-line entry point."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from dieroll.cli import main

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_prints_result(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1+2*3"]) == 0
    assert capsys.readouterr().out == "9\n"


def test_arguments_joined_without_separator(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1", "0", "-", "3"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_negative_looking_argument_is_expression(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["10", "-3"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_double_dash_dropped(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--", "2*3"]) == 0
    assert capsys.readouterr().out == "6\n"


def test_seed_is_reproducible(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--seed", "99", "10d20"]) == 0
    first = capsys.readouterr().out
    assert main(["--seed", "99", "10d20"]) == 0
    second = capsys.readouterr().out
    assert first == second
    assert 10 <= int(first) <= 200


def test_malformed_input_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["2d"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "dieroll: error: Malformed number" in captured.err


def test_no_arguments_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "Malformed number" in capsys.readouterr().err


def test_invalid_dice_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["3d0"]) == 1
    assert "at least one side" in capsys.readouterr().err


def test_log_level_case_insensitive(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--log-level", "debug", "4"]) == 0
    assert capsys.readouterr().out == "4\n"


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "loud", "4"])
    assert excinfo.value.code == 2


def _run_module(*args: str, **env: str) -> subprocess.CompletedProcess[str]:
    clean_env = {k: v for k, v in os.environ.items() if not k.startswith("DIEROLL_")}
    clean_env.update(env)
    return subprocess.run(
        [sys.executable, "-m", "dieroll", *args],
        cwd=_PROJECT_ROOT,
        env=clean_env,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_module_entry_point_prints_result() -> None:
    proc = _run_module("1+2*3")
    assert proc.returncode == 0
    assert proc.stdout == "9\n"


def test_module_entry_point_exits_nonzero_on_failure() -> None:
    proc = _run_module("2d")
    assert proc.returncode == 1
    assert proc.stdout == ""
    assert "dieroll: error: Malformed number" in proc.stderr


def test_module_entry_point_bad_env_log_level() -> None:
    proc = _run_module("2+3", DIEROLL_LOG_LEVEL="loud")
    assert proc.returncode == 1
    assert "dieroll: error: invalid configuration" in proc.stderr
    assert "Traceback" not in proc.stderr
