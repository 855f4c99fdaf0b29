from __future__ import annotations

import logging
from typing import Any

import numpy as np

LOGGER = logging.getLogger(__name__)

# Hour ranges per day period; night runs past midnight, hence 21..27.
DAY_PERIODS: tuple[range, ...] = (
    range(21, 27),
    range(3, 9),
    range(9, 15),
    range(15, 21),
)


def bucket_counts(timestamps_s: Any, duration_s: float, bucket_count: int = 5) -> np.ndarray:
    """Count reaction timestamps per equal-width bucket of a playback duration.

    Timestamps outside ``[0, duration_s]`` are dropped. A timestamp equal to the
    duration lands in the last bucket.
    """
    if bucket_count <= 0:
        raise ValueError("bucket_count must be > 0")
    counts = np.zeros(bucket_count, dtype=np.int64)
    ts = np.asarray(timestamps_s, dtype=np.float64).reshape(-1)
    if ts.size == 0 or duration_s <= 0:
        return counts

    in_range = np.isfinite(ts) & (ts >= 0.0) & (ts <= float(duration_s))
    dropped = int(ts.size - np.count_nonzero(in_range))
    if dropped:
        LOGGER.warning("dropping %d reaction timestamps outside [0, %s]", dropped, duration_s)

    idx = np.floor(ts[in_range] / float(duration_s) * bucket_count).astype(np.int64)
    np.clip(idx, 0, bucket_count - 1, out=idx)
    np.add.at(counts, idx, 1)
    return counts


def day_period_index(hour: int) -> int:
    hour = int(hour)
    for period_idx, period in enumerate(DAY_PERIODS):
        if hour in period or hour + 24 in period:
            return period_idx
    return 0
