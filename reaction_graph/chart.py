from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
from typing import Any

import numpy as np

from reaction_graph.axis import DegreeRange, DegreeTick, degree_range, degree_ticks, duration_ticks
from reaction_graph.config import ChartConfig
from reaction_graph.errors import GraphDataError
from reaction_graph.normalize import coerce_series, normalize_points
from reaction_graph.path import Circle, CurveSegment, FrameSize, build_marker_points, build_mask_points, build_segments
from reaction_graph.spline import ControlPoints, solve_control_points

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeriesCurve:
    index: int
    values: np.ndarray
    points: np.ndarray
    controls: ControlPoints
    selected: bool = True


@dataclass(frozen=True)
class SeriesPath:
    index: int
    segments: list[CurveSegment]
    markers: list[Circle]
    masks: list[Circle]
    line_width: float


class ReactionChart:
    """Curves for several reaction series plotted against one shared axis."""

    def __init__(
        self,
        curves: list[SeriesCurve],
        *,
        min_value: int,
        max_value: int,
        degrees: DegreeRange,
        duration_s: float = 0.0,
        config: ChartConfig | None = None,
    ) -> None:
        self._curves = curves
        self._min_value = min_value
        self._max_value = max_value
        self._degrees = degrees
        self._duration_s = float(duration_s)
        self._config = config or ChartConfig()

    @classmethod
    def from_series(
        cls,
        values: Sequence[Any],
        selected: Sequence[bool] | None = None,
        *,
        duration_s: float = 0.0,
        config: ChartConfig | None = None,
    ) -> "ReactionChart":
        series = [coerce_series(v, label=f"series[{i}]") for i, v in enumerate(values)]
        if selected is None:
            flags = [True] * len(series)
        else:
            flags = [bool(s) for s in selected]
            if len(flags) != len(series):
                raise GraphDataError(f"selection length {len(flags)} does not match series count {len(series)}")

        lengths = {arr.size for arr in series}
        if len(lengths) > 1:
            detail = ", ".join(f"series[{i}]={arr.size}" for i, arr in enumerate(series))
            raise GraphDataError(f"all series in one chart must share a length; got {detail}")

        min_value, max_value = _value_bounds(series, flags)
        degrees = degree_range(min_value, max_value)
        curves: list[SeriesCurve] = []
        for i, (arr, flag) in enumerate(zip(series, flags, strict=True)):
            points = normalize_points(arr, degrees)
            curves.append(
                SeriesCurve(index=i, values=arr, points=points, controls=solve_control_points(points), selected=flag)
            )
        LOGGER.debug(
            "built reaction chart: series=%d selected=%d range=[%d, %d] degrees=%s",
            len(curves),
            sum(flags),
            min_value,
            max_value,
            degrees,
        )
        return cls(
            curves,
            min_value=min_value,
            max_value=max_value,
            degrees=degrees,
            duration_s=duration_s,
            config=config,
        )

    @property
    def curves(self) -> list[SeriesCurve]:
        return list(self._curves)

    @property
    def degrees(self) -> DegreeRange:
        return self._degrees

    @property
    def min_value(self) -> int:
        return self._min_value

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def config(self) -> ChartConfig:
        return self._config

    def degree_ticks(self) -> list[DegreeTick]:
        return degree_ticks(self._min_value, self._max_value)

    def duration_ticks(self) -> list[str]:
        return duration_ticks(
            self._duration_s,
            self._config.duration_tick_count,
            leading_zero=self._config.leading_zero,
        )

    def layout(self, frame_size: FrameSize) -> list[SeriesPath]:
        """Pixel-space geometry for every selected series."""
        paths: list[SeriesPath] = []
        for curve in self._curves:
            if not curve.selected:
                continue
            paths.append(
                SeriesPath(
                    index=curve.index,
                    segments=build_segments(curve.points, curve.controls, frame_size),
                    markers=build_marker_points(curve.points, frame_size, self._config.marker_radius),
                    masks=build_mask_points(curve.points, frame_size, self._config.mask_radius),
                    line_width=self._config.line_width,
                )
            )
        return paths


def _value_bounds(series: list[np.ndarray], flags: list[bool]) -> tuple[int, int]:
    chosen = [arr for arr, flag in zip(series, flags, strict=True) if flag and arr.size]
    if not chosen:
        return 0, 0
    stacked = np.concatenate(chosen)
    return int(stacked.min()), int(stacked.max())
