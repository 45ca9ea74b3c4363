"""CLI argument parsers and validators."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import typer
import yaml

_INT_PATTERN = re.compile(r"^-?\d+$")
_FLOAT_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?$")


def coerce_value(value: str) -> bool | int | float | str:
    """Coerce a string value to its appropriate type.

    Args:
        value: String value to coerce

    Returns:
        Coerced value (bool, int, float, or str)
    """
    value_lower = value.lower()

    if value_lower in ("true", "false"):
        return value_lower == "true"

    if _INT_PATTERN.match(value):
        return int(value)

    if _FLOAT_PATTERN.match(value):
        return float(value)

    return value


def parse_assignment(value: str) -> tuple[str, bool | int | float | str]:
    """Parse a --set argument in format KEY=VALUE."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, raw = value.split("=", 1)
    key = key.strip()
    if not key:
        raise typer.BadParameter(f"Missing key in: {value!r}")
    return key, coerce_value(raw)


def load_manifest_file(path: Path) -> dict[str, Any]:
    """Read a scaffold manifest YAML file."""
    if not path.exists():
        raise typer.BadParameter(f"Manifest not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise typer.BadParameter(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise typer.BadParameter(f"Manifest must be a mapping: {path}")

    return data
