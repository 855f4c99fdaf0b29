from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import logging
from pathlib import Path
import sys

from reaction_graph import (
    ChartConfig,
    GraphDataError,
    ReactionChart,
    bucket_counts,
    degree_ticks,
    load_chart_config,
)
from reaction_graph.path import flatten_segments

LOGGER = logging.getLogger("reaction_graph.cli")

DEFAULT_FRAME = (320, 165)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="reaction-graph")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--config", type=Path, default=None, help="TOML file with a [chart] table.")
    sub = parser.add_subparsers(dest="command", required=True)

    ticks = sub.add_parser("ticks", help="Print vertical axis degree ticks for a value range.")
    ticks.add_argument("--min", dest="min_value", type=int, required=True)
    ticks.add_argument("--max", dest="max_value", type=int, required=True)

    curve = sub.add_parser("curve", help="Print curve geometry for one series.")
    curve.add_argument("--values", required=True, help="Comma separated counts, e.g. 1,3,2,5,4.")
    _add_frame_args(curve)
    curve.add_argument("--flatten", action="store_true", help="Also emit a sampled polyline.")

    chart = sub.add_parser("chart", help="Print geometry for several series sharing one axis.")
    chart.add_argument("--series", action="append", required=True, help="Comma separated counts; repeatable.")
    chart.add_argument(
        "--hidden",
        type=int,
        action="append",
        default=[],
        help="Index of a series excluded from display and from the axis range; repeatable.",
    )
    chart.add_argument("--duration", type=float, default=0.0, help="Playback duration in seconds.")
    _add_frame_args(chart)

    buckets = sub.add_parser("buckets", help="Count reaction timestamps per playback bucket.")
    buckets.add_argument("--timestamps", required=True, help="Comma separated seconds.")
    buckets.add_argument("--duration", type=float, required=True)

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_chart_config(args.config) if args.config is not None else ChartConfig()
        payload = _run(args, config)
    except (ValueError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(json.dumps(payload, indent=2))
    return 0


def _run(args: argparse.Namespace, config: ChartConfig) -> object:
    LOGGER.debug("command=%s config=%s", args.command, config)
    if args.command == "ticks":
        return [asdict(t) for t in degree_ticks(args.min_value, args.max_value)]

    if args.command == "curve":
        chart = ReactionChart.from_series([_parse_ints(args.values)], config=config)
        out = _chart_payload(chart, args.frame)
        if args.flatten:
            segments = chart.layout(args.frame)[0].segments
            out["polyline"] = flatten_segments(segments, config.flatten_steps).tolist()
        return out

    if args.command == "chart":
        values = [_parse_ints(raw) for raw in args.series]
        hidden = set(args.hidden)
        unknown = sorted(i for i in hidden if not 0 <= i < len(values))
        if unknown:
            raise GraphDataError(f"--hidden index out of range for {len(values)} series: {unknown}")
        selected = [i not in hidden for i in range(len(values))]
        chart = ReactionChart.from_series(values, selected, duration_s=args.duration, config=config)
        return _chart_payload(chart, args.frame)

    if args.command == "buckets":
        stamps = [float(v) for v in args.timestamps.split(",") if v.strip()]
        return bucket_counts(stamps, args.duration, config.bucket_count).tolist()

    raise RuntimeError(f"unsupported command: {args.command}")


def _chart_payload(chart: ReactionChart, frame: tuple[int, int]) -> dict[str, object]:
    return {
        "frame": list(frame),
        "degrees": asdict(chart.degrees),
        "ticks": [asdict(t) for t in chart.degree_ticks()],
        "duration_ticks": chart.duration_ticks(),
        "series": [asdict(p) for p in chart.layout(frame)],
    }


def _add_frame_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--frame",
        type=_parse_frame,
        default=DEFAULT_FRAME,
        metavar="WxH",
        help=f"Pixel frame size. Default: {DEFAULT_FRAME[0]}x{DEFAULT_FRAME[1]}.",
    )


def _parse_frame(raw: str) -> tuple[int, int]:
    width, sep, height = raw.lower().partition("x")
    try:
        frame = (int(width), int(height))
    except ValueError:
        frame = None
    if not sep or frame is None or min(frame) <= 0:
        raise argparse.ArgumentTypeError(f"frame must look like 320x165 with positive sides, got {raw!r}")
    return frame


def _parse_ints(raw: str) -> list[int]:
    out: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            out.append(int(part))
        except ValueError as exc:
            raise GraphDataError(f"not an integer count: {part!r}") from exc
    return out


if __name__ == "__main__":
    sys.exit(main())
