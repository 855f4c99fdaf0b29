from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ControlPoints:
    """Per-segment Bezier control points; ``first[i]``/``second[i]`` shape segment i."""

    first: np.ndarray
    second: np.ndarray

    @property
    def segment_count(self) -> int:
        return int(self.first.shape[0])


def solve_control_points(points: np.ndarray) -> ControlPoints:
    """Fit a smooth cubic Bezier spline through ``points``.

    ``points`` is an ``(N, 2)`` array. The first control point of every
    segment comes from a tridiagonal system solved with the Thomas algorithm;
    the second control point is derived from the next segment's first control
    point so tangents stay continuous at every interior point. Fewer than two
    points produce no segments.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    count = pts.shape[0] - 1
    if count <= 0:
        empty = np.zeros((0, 2), dtype=np.float64)
        return ControlPoints(first=empty, second=empty.copy())

    a, b, c, rhs = _build_system(pts, count)
    first = _solve_tridiagonal(a, b, c, rhs)

    second = np.empty_like(first)
    second[:-1] = 2.0 * pts[1:-1] - first[1:]
    second[-1] = (pts[-1] + first[-1]) / 2.0
    return ControlPoints(first=first, second=second)


def _build_system(pts: np.ndarray, count: int) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    a = np.empty(count, dtype=np.float64)
    b = np.empty(count, dtype=np.float64)
    c = np.empty(count, dtype=np.float64)
    rhs = np.empty((count, 2), dtype=np.float64)

    for i in range(count):
        p0 = pts[i]
        p1 = pts[i + 1]
        # A single segment is both first and last; the closing row wins.
        if i == count - 1:
            a[i], b[i], c[i] = 2.0, 7.0, 0.0
            rhs[i] = 8.0 * p0 + p1
        elif i == 0:
            a[i], b[i], c[i] = 0.0, 2.0, 1.0
            rhs[i] = p0 + 2.0 * p1
        else:
            a[i], b[i], c[i] = 1.0, 4.0, 1.0
            rhs[i] = 4.0 * p0 + 2.0 * p1
    return a, b, c, rhs


def _solve_tridiagonal(a: np.ndarray, b: np.ndarray, c: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    count = b.size
    for i in range(1, count):
        m = a[i] / b[i - 1]
        b[i] -= m * c[i - 1]
        rhs[i] -= m * rhs[i - 1]

    out = np.empty_like(rhs)
    out[count - 1] = rhs[count - 1] / b[count - 1]
    for i in range(count - 2, -1, -1):
        out[i] = (rhs[i] - c[i] * out[i + 1]) / b[i]
    return out
