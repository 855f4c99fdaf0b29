from reaction_graph.axis import DegreeRange, DegreeTick, degree_range, degree_ticks, duration_ticks, short_number
from reaction_graph.buckets import bucket_counts, day_period_index
from reaction_graph.chart import ReactionChart, SeriesCurve, SeriesPath
from reaction_graph.config import ChartConfig, load_chart_config
from reaction_graph.errors import GraphDataError
from reaction_graph.normalize import coerce_series, normalize_points
from reaction_graph.path import Circle, CurveSegment, build_mask_points, build_segments
from reaction_graph.spline import ControlPoints, solve_control_points

__all__ = [
    "ChartConfig",
    "Circle",
    "ControlPoints",
    "CurveSegment",
    "DegreeRange",
    "DegreeTick",
    "GraphDataError",
    "ReactionChart",
    "SeriesCurve",
    "SeriesPath",
    "bucket_counts",
    "build_mask_points",
    "build_segments",
    "coerce_series",
    "day_period_index",
    "degree_range",
    "degree_ticks",
    "duration_ticks",
    "load_chart_config",
    "normalize_points",
    "short_number",
    "solve_control_points",
]
