"""
Configuration for the parencalc interpreter.

Settings come from three places, later ones winning:

1. Defaults on ``CalcConfig``
2. The ``[calc]`` table of ``parencalc.toml``
3. Environment variables (``PARENCALC_INT_BITS``, ``PARENCALC_LENIENT_OPERATORS``,
   ``PARENCALC_MAX_DEPTH``)

Usage:
    from parencalc.core.config import load_config

    config = load_config(Path("parencalc.toml"))
    evaluate("1+2", config)
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from parencalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "parencalc.toml"

ENV_INT_BITS = "PARENCALC_INT_BITS"
ENV_LENIENT_OPERATORS = "PARENCALC_LENIENT_OPERATORS"
ENV_MAX_DEPTH = "PARENCALC_MAX_DEPTH"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class CalcConfig(BaseModel):
    """Interpreter settings."""

    int_bits: int = Field(
        default=32,
        ge=8,
        le=1024,
        description="Width of the signed integer type literals and results must fit",
    )
    lenient_operators: bool = Field(
        default=False,
        description="Overwrite a pending operator instead of rejecting a second one",
    )
    max_depth: int = Field(
        default=200,
        ge=1,
        le=200,
        description="Maximum parenthesis nesting depth",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def max_int(self) -> int:
        return 2 ** (self.int_bits - 1) - 1

    @property
    def min_int(self) -> int:
        return -(2 ** (self.int_bits - 1))

    def in_range(self, value: int) -> bool:
        """Check whether *value* fits the configured integer width."""
        return self.min_int <= value <= self.max_int


DEFAULT_CONFIG = CalcConfig()


def load_config(toml_path: Path | None = None) -> CalcConfig:
    """
    Load interpreter configuration.

    Args:
        toml_path: Path to a TOML file. None means ``parencalc.toml`` in the
            current directory, if it exists.

    Returns:
        CalcConfig with file values and environment overrides applied

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values.
    """
    if toml_path is None:
        toml_path = Path(DEFAULT_CONFIG_FILE)

    data: dict[str, Any] = {}
    if toml_path.exists():
        try:
            with open(toml_path, "rb") as f:
                section = tomllib.load(f).get("calc", {})
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e
        if not isinstance(section, dict):
            raise ConfigError(f"[calc] in {toml_path} must be a table")
        data = dict(section)
        logger.debug("Loaded [calc] settings from %s: %s", toml_path, data)

    data.update(_env_overrides())

    try:
        return CalcConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _env_overrides() -> dict[str, Any]:
    """Collect settings from environment variables, skipping invalid values."""
    overrides: dict[str, Any] = {}

    for var, key in ((ENV_INT_BITS, "int_bits"), (ENV_MAX_DEPTH, "max_depth")):
        raw = os.environ.get(var, "").strip()
        if not raw:
            continue
        try:
            overrides[key] = int(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r: not an integer", var, raw)

    raw = os.environ.get(ENV_LENIENT_OPERATORS, "").lower().strip()
    if raw in _TRUE_VALUES:
        overrides["lenient_operators"] = True
    elif raw in _FALSE_VALUES:
        overrides["lenient_operators"] = False
    elif raw:
        logger.warning(
            "Ignoring %s=%r. Valid values: true, false, 1, 0, yes, no, on, off.",
            ENV_LENIENT_OPERATORS,
            raw,
        )

    return overrides
