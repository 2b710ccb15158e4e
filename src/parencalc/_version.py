"""Version lookup for parencalc."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Installed distribution version; a source checkout falls back to pyproject.toml."""
    try:
        return version("parencalc")
    except PackageNotFoundError:
        pass

    if _PYPROJECT.exists():
        with open(_PYPROJECT, "rb") as f:
            return str(tomllib.load(f).get("project", {}).get("version", "0.0.0"))
    return "0.0.0"
