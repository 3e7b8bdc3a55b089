"""Unit tests for the repository architecture check script."""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts/check_architecture.py"


def test_architecture_boundaries_hold(capsys: pytest.CaptureFixture[str]) -> None:
    runpy.run_path(str(SCRIPT), run_name="__main__")
    assert "Architecture checks passed." in capsys.readouterr().out
