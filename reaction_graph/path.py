from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from reaction_graph.errors import GraphDataError
from reaction_graph.spline import ControlPoints


Point = tuple[float, float]
FrameSize = tuple[float, float]

DEFAULT_MASK_RADIUS = 5.0
DEFAULT_MARKER_RADIUS = 6.0


@dataclass(frozen=True)
class CurveSegment:
    start: Point
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    def bounds(self) -> tuple[float, float, float, float]:
        cx, cy = self.center
        return (cx - self.radius, cy - self.radius, 2.0 * self.radius, 2.0 * self.radius)


def adapt_points(points: np.ndarray, frame_size: FrameSize) -> np.ndarray:
    """Scale unit-space points component-wise into a pixel frame."""
    width, height = _validate_frame(frame_size)
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return pts * np.asarray([width, height], dtype=np.float64)


def build_segments(points: np.ndarray, controls: ControlPoints, frame_size: FrameSize) -> list[CurveSegment]:
    pts = adapt_points(points, frame_size)
    count = max(0, pts.shape[0] - 1)
    if controls.first.shape[0] != controls.second.shape[0]:
        raise GraphDataError("first and second control point counts differ")
    if controls.segment_count not in (0, count):
        raise GraphDataError(f"expected {count} control point pairs, got {controls.segment_count}")
    if controls.segment_count == 0:
        return []

    first = adapt_points(controls.first, frame_size)
    second = adapt_points(controls.second, frame_size)
    return [
        CurveSegment(
            start=_as_point(pts[i]),
            control1=_as_point(first[i]),
            control2=_as_point(second[i]),
            end=_as_point(pts[i + 1]),
        )
        for i in range(count)
    ]


def build_mask_points(points: np.ndarray, frame_size: FrameSize, radius: float = DEFAULT_MASK_RADIUS) -> list[Circle]:
    """One filled circle per data point, used to cap line ends under markers."""
    return _circles(points, frame_size, radius)


def build_marker_points(points: np.ndarray, frame_size: FrameSize, radius: float = DEFAULT_MARKER_RADIUS) -> list[Circle]:
    return _circles(points, frame_size, radius)


def evaluate_segment(segment: CurveSegment, t: float | np.ndarray) -> np.ndarray:
    """Evaluate the cubic Bezier at parameter(s) ``t`` in [0, 1]."""
    ts = np.asarray(t, dtype=np.float64)
    u = 1.0 - ts
    p = np.asarray([segment.start, segment.control1, segment.control2, segment.end], dtype=np.float64)
    w0 = u**3
    w1 = 3.0 * u**2 * ts
    w2 = 3.0 * u * ts**2
    w3 = ts**3
    return w0[..., None] * p[0] + w1[..., None] * p[1] + w2[..., None] * p[2] + w3[..., None] * p[3]


def flatten_segments(segments: list[CurveSegment], steps: int = 16) -> np.ndarray:
    """Sample consecutive segments into one ``(M, 2)`` polyline."""
    if steps <= 0:
        raise ValueError("steps must be > 0")
    if not segments:
        return np.zeros((0, 2), dtype=np.float64)
    ts = np.linspace(0.0, 1.0, steps + 1, dtype=np.float64)
    parts = [evaluate_segment(segments[0], ts)]
    # Joins are shared, so later segments skip their t=0 sample.
    parts.extend(evaluate_segment(seg, ts[1:]) for seg in segments[1:])
    return np.concatenate(parts, axis=0)


def _circles(points: np.ndarray, frame_size: FrameSize, radius: float) -> list[Circle]:
    if radius <= 0:
        raise ValueError("radius must be > 0")
    pts = adapt_points(points, frame_size)
    return [Circle(center=_as_point(p), radius=float(radius)) for p in pts]


def _validate_frame(frame_size: FrameSize) -> tuple[float, float]:
    width, height = frame_size
    if width <= 0 or height <= 0:
        raise ValueError("frame width/height must be > 0")
    return float(width), float(height)


def _as_point(row: np.ndarray) -> Point:
    return (float(row[0]), float(row[1]))
