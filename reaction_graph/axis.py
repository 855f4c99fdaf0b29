from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

import numpy as np


SHORT_NUMBER_UNITS = (
    (1, ""),
    (1_000, "K"),
    (1_000_000, "M"),
    (1_000_000_000, "B"),
)


@dataclass(frozen=True)
class DegreeRange:
    """Rounded vertical axis bounds shared by every series of one chart."""

    min_degree: int
    max_degree: int
    scale: int

    @property
    def span(self) -> int:
        return self.max_degree - self.min_degree

    @property
    def is_flat(self) -> bool:
        return self.max_degree == self.min_degree


@dataclass(frozen=True)
class DegreeTick:
    index: int
    label: str
    value: int


def axis_scale(max_value: int) -> int:
    """Return the rounding step for an axis topping out at ``max_value``.

    The step is one order of magnitude below the leading digit, so values in
    the hundreds round to tens and values under 100 round to ones.
    """
    max_value = int(max_value)
    if max_value <= 0:
        return 1
    digits = len(str(max_value))
    return 10 ** max(0, digits - 2)


def max_degree(max_value: int) -> int:
    scale = axis_scale(max_value)
    max_value = int(max_value)
    # Ceiling division keeps exact multiples in place.
    return -(-max_value // scale) * scale


def min_degree(min_value: int, max_value: int) -> int:
    scale = axis_scale(max_value)
    return max(0, (int(min_value) // scale) * scale)


def degree_range(min_value: int, max_value: int) -> DegreeRange:
    return DegreeRange(
        min_degree=min_degree(min_value, max_value),
        max_degree=max_degree(max_value),
        scale=axis_scale(max_value),
    )


def degree_ticks(min_value: int, max_value: int) -> list[DegreeTick]:
    """Enumerate labelled ticks from the min degree up to the max degree.

    Ticks are returned in ascending value order; ``index`` counts from the
    top of the axis so the largest value carries index 0.
    """
    degrees = degree_range(min_value, max_value)
    count = degrees.span // degrees.scale + 1
    ticks: list[DegreeTick] = []
    current = degrees.min_degree
    while current <= degrees.max_degree:
        if current >= 0:
            ticks.append(DegreeTick(index=count - 1 - len(ticks), label=short_number(current), value=current))
        current += degrees.scale
    return ticks


def short_number(value: int | float) -> str:
    if not np.isfinite(value):
        return str(value)
    sign = "-" if value < 0 else ""
    d = Decimal(str(abs(value)))
    pos = 0
    for i, (unit, _) in enumerate(SHORT_NUMBER_UNITS):
        if d >= unit:
            pos = i
    # 999_950 rounds to 1000K; carry into the next unit.
    while pos + 1 < len(SHORT_NUMBER_UNITS) and _round_tenth(d / SHORT_NUMBER_UNITS[pos][0]) >= 1000:
        pos += 1
    unit, suffix = SHORT_NUMBER_UNITS[pos]
    return f"{sign}{_trim(d / unit, decimals=1)}{suffix}"


def duration_ticks(duration_s: float, count: int = 5, *, leading_zero: bool = False) -> list[str]:
    """Horizontal axis labels, in minutes, spread evenly over a playback duration."""
    origin = "0" if leading_zero else ""
    if not np.isfinite(duration_s) or duration_s <= 0:
        return [origin]
    total_minutes = int((float(duration_s) + 30.0) // 60.0)
    if count < 2 or total_minutes <= 0:
        return [origin]

    values = np.linspace(0.0, float(total_minutes), count, dtype=np.float64)
    step = float(values[1] - values[0])
    labels = [format_tick(float(v), step=step) for v in values]
    labels[0] = origin
    return labels


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and np.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    decimals = _decimals_from_step(step) if step is not None else 6
    out = _trim(Decimal(str(value)), decimals=decimals)
    if out == "-0":
        out = "0"
    return out


def _round_tenth(d: Decimal) -> Decimal:
    return d.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def _trim(d: Decimal, *, decimals: int) -> str:
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    # Only trim trailing zeros for fractional values (preserve integer zeros like 30, 40).
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    return out


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    d = Decimal(str(step)).normalize()
    exp = d.as_tuple().exponent
    decimals = max(0, -int(exp))
    return min(12, decimals)
