"""Shared pytest fixtures for parencalc tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from parencalc.core.config import CalcConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PARENCALC_* variables from the outer shell out of every test."""
    for var in ("PARENCALC_INT_BITS", "PARENCALC_LENIENT_OPERATORS", "PARENCALC_MAX_DEPTH"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    """Drop handlers the CLI attaches so they do not outlive the test's streams."""
    yield
    logger = logging.getLogger("parencalc")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def lenient_config() -> CalcConfig:
    """Config that lets a second operator overwrite the pending one."""
    return CalcConfig(lenient_operators=True)


@pytest.fixture
def wide_config() -> CalcConfig:
    """64-bit integer range."""
    return CalcConfig(int_bits=64)
