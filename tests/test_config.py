from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from reaction_graph.config import ChartConfig, chart_config_from_mapping, load_chart_config


class ChartConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = ChartConfig()
        self.assertEqual(config.bucket_count, 5)
        self.assertEqual(config.mask_radius, 5.0)
        self.assertEqual(config.marker_radius, 6.0)
        self.assertFalse(config.leading_zero)

    def test_load_chart_table(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "chart.toml"
            path.write_text(
                "[chart]\nbucket_count = 8\nmask_radius = 4\nleading_zero = true\n",
                encoding="utf-8",
            )
            config = load_chart_config(path)
        self.assertEqual(config.bucket_count, 8)
        self.assertEqual(config.mask_radius, 4.0)
        self.assertTrue(config.leading_zero)
        self.assertEqual(config.marker_radius, 6.0)

    def test_load_flat_table(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "chart.toml"
            path.write_text("duration_tick_count = 3\n", encoding="utf-8")
            config = load_chart_config(path)
        self.assertEqual(config.duration_tick_count, 3)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_chart_config("/nonexistent/chart.toml")

    def test_invalid_toml(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "chart.toml"
            path.write_text("bucket_count = = 3\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_chart_config(path)

    def test_unknown_key_is_ignored_with_warning(self) -> None:
        with self.assertLogs("reaction_graph.config", level="WARNING"):
            config = chart_config_from_mapping({"colour": "red", "line_width": 2})
        self.assertEqual(config.line_width, 2.0)

    def test_type_and_value_validation(self) -> None:
        with self.assertRaises(ValueError):
            chart_config_from_mapping({"bucket_count": 2.5})
        with self.assertRaises(ValueError):
            chart_config_from_mapping({"leading_zero": 1})
        with self.assertRaises(ValueError):
            chart_config_from_mapping({"mask_radius": True})
        with self.assertRaises(ValueError):
            chart_config_from_mapping({"bucket_count": 0})
        with self.assertRaises(ValueError):
            ChartConfig(marker_radius=-1.0)


if __name__ == "__main__":
    unittest.main()
