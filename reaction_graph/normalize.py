from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from reaction_graph.axis import DegreeRange
from reaction_graph.errors import GraphDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]

# float64 cannot hold int64 max exactly; 2**63 is the first value that overflows the cast.
_INT64_LIMIT = float(2**63)


def coerce_series(values: Any, *, label: str = "series") -> np.ndarray:
    """Coerce raw per-bucket counts into a 1-D int64 array.

    Accepts plain sequences, numpy arrays, pandas Series and torch tensors.
    Counts must be finite, integral and non-negative. An empty input yields an
    empty array.
    """
    arr = _coerce_1d_numeric(values, label=label)
    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)
    if not np.all(np.isfinite(arr)):
        raise GraphDataError(f"{label} contains non-finite values")
    if not np.all(np.equal(np.floor(arr), arr)):
        raise GraphDataError(f"{label} contains non-integral counts")
    if np.any(arr < 0):
        raise GraphDataError(f"{label} contains negative counts")
    if np.any(arr >= _INT64_LIMIT):
        raise GraphDataError(f"{label} contains counts beyond int64 range")
    return arr.astype(np.int64)


def normalize_points(series: Any, degrees: DegreeRange) -> np.ndarray:
    """Map counts to unit-space points against a shared degree range.

    Returns an ``(N, 2)`` float64 array. x is spread evenly over [0, 1] by
    index (0 for a single point). y is ``1 - fraction`` so larger counts plot
    higher. A flat range (``max_degree == min_degree``) puts every point at
    y = 0 instead of dividing by zero.
    """
    values = np.asarray(series, dtype=np.float64).reshape(-1)
    n = values.size
    points = np.zeros((n, 2), dtype=np.float64)
    if n == 0:
        return points

    if n > 1:
        points[:, 0] = np.arange(n, dtype=np.float64) / float(n - 1)

    if degrees.is_flat:
        return points
    fraction = (values - float(degrees.min_degree)) / float(degrees.span)
    points[:, 1] = 1.0 - fraction
    return points


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise GraphDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise GraphDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise GraphDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise GraphDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            raise GraphDataError(f"{label} is missing a count at index {i}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise GraphDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
