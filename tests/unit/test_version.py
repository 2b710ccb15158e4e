"""Tests for parencalc version lookup."""

from __future__ import annotations

import tomllib
from pathlib import Path

import parencalc
from parencalc._version import get_version


def test_version_matches_pyproject() -> None:
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    with open(pyproject, "rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert get_version() == expected
    assert parencalc.__version__ == expected
