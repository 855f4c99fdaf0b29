from __future__ import annotations

from dataclasses import dataclass, fields
import logging
from pathlib import Path
import tomllib
from typing import Any

from reaction_graph.path import DEFAULT_MARKER_RADIUS, DEFAULT_MASK_RADIUS

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartConfig:
    bucket_count: int = 5
    duration_tick_count: int = 5
    leading_zero: bool = False
    mask_radius: float = DEFAULT_MASK_RADIUS
    marker_radius: float = DEFAULT_MARKER_RADIUS
    line_width: float = 3.0
    flatten_steps: int = 16

    def __post_init__(self) -> None:
        if self.bucket_count <= 0:
            raise ValueError("bucket_count must be > 0")
        if self.duration_tick_count <= 0:
            raise ValueError("duration_tick_count must be > 0")
        if self.mask_radius <= 0 or self.marker_radius <= 0:
            raise ValueError("mask_radius/marker_radius must be > 0")
        if self.line_width <= 0:
            raise ValueError("line_width must be > 0")
        if self.flatten_steps <= 0:
            raise ValueError("flatten_steps must be > 0")


_INT_FIELDS = {"bucket_count", "duration_tick_count", "flatten_steps"}
_FLOAT_FIELDS = {"mask_radius", "marker_radius", "line_width"}
_BOOL_FIELDS = {"leading_zero"}


def load_chart_config(path: str | Path) -> ChartConfig:
    """Load chart settings from the ``[chart]`` table of a TOML file.

    A file without a ``[chart]`` table is read as a flat table of settings.
    Missing keys keep their defaults; unknown keys are ignored with a warning.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"chart config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"invalid chart config {config_path}: {exc}") from exc
    table = raw.get("chart", raw)
    if not isinstance(table, dict):
        raise ValueError("`chart` must be a table")
    return chart_config_from_mapping(table)


def chart_config_from_mapping(raw: dict[str, Any]) -> ChartConfig:
    known = {f.name for f in fields(ChartConfig)}
    values: dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            LOGGER.warning("ignoring unknown chart config key: %s", key)
            continue
        values[key] = _coerce_field(key, value)
    return ChartConfig(**values)


def _coerce_field(key: str, value: Any) -> Any:
    if key in _BOOL_FIELDS:
        if not isinstance(value, bool):
            raise ValueError(f"`{key}` must be a boolean")
        return value
    if isinstance(value, bool):
        raise ValueError(f"`{key}` must be a number")
    if key in _INT_FIELDS:
        if not isinstance(value, int):
            raise ValueError(f"`{key}` must be an integer")
        return value
    if key in _FLOAT_FIELDS:
        if not isinstance(value, (int, float)):
            raise ValueError(f"`{key}` must be a number")
        return float(value)
    return value
