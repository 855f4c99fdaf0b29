from __future__ import annotations

import unittest

from reaction_graph.buckets import bucket_counts, day_period_index


class BucketCountTests(unittest.TestCase):
    def test_counts_per_bucket(self) -> None:
        counts = bucket_counts([0.0, 5.0, 25.0, 49.9, 50.0, 99.0, 100.0], duration_s=100.0)
        self.assertEqual(counts.tolist(), [2, 1, 2, 0, 2])

    def test_out_of_range_timestamps_dropped(self) -> None:
        with self.assertLogs("reaction_graph.buckets", level="WARNING"):
            counts = bucket_counts([-1.0, 10.0, 120.0], duration_s=100.0, bucket_count=2)
        self.assertEqual(counts.tolist(), [1, 0])

    def test_degenerate_inputs(self) -> None:
        self.assertEqual(bucket_counts([], duration_s=60.0).tolist(), [0, 0, 0, 0, 0])
        self.assertEqual(bucket_counts([1.0], duration_s=0.0, bucket_count=3).tolist(), [0, 0, 0])
        with self.assertRaises(ValueError):
            bucket_counts([1.0], duration_s=10.0, bucket_count=0)


class DayPeriodTests(unittest.TestCase):
    def test_periods(self) -> None:
        self.assertEqual(day_period_index(22), 0)
        self.assertEqual(day_period_index(0), 0)
        self.assertEqual(day_period_index(2), 0)
        self.assertEqual(day_period_index(3), 1)
        self.assertEqual(day_period_index(9), 2)
        self.assertEqual(day_period_index(14), 2)
        self.assertEqual(day_period_index(15), 3)
        self.assertEqual(day_period_index(20), 3)

    def test_unknown_hour_falls_back_to_first_period(self) -> None:
        self.assertEqual(day_period_index(40), 0)


if __name__ == "__main__":
    unittest.main()
