"""Command-line access to the random data generators."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from bench_data.config import GeneratorConfig, load_config
from bench_data.errors import InvalidArgument
from bench_data.generators import random_city, random_vector
from bench_data.points import random_points, random_search_request
from bench_data.rng import get_rng, seed_rng
from bench_data.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bench_data", description=__doc__)
    parser.add_argument("--config", type=Path, help="Path to a bench-data JSON config.")
    parser.add_argument("--seed", type=int, help="Seed for reproducible output (overrides config).")
    sub = parser.add_subparsers(dest="command", required=True)

    points = sub.add_parser("points", help="Emit points as JSON lines.")
    points.add_argument("--dim", type=int, help="Vector dimension.")
    points.add_argument("--count", type=int, help="Number of points.")
    points.add_argument("--start-id", type=int, help="Id of the first point.")

    vector = sub.add_parser("vector", help="Emit a single random vector.")
    vector.add_argument("--dim", type=int, help="Vector dimension.")

    sub.add_parser("city", help="Emit a single random city name.")

    search = sub.add_parser("search", help="Emit a search request body.")
    search.add_argument("--dim", type=int, help="Vector dimension.")
    search.add_argument("--limit", type=int, default=10, help="Number of results to request.")
    search.add_argument(
        "--with-filter",
        action="store_true",
        default=None,
        help="Add a payload filter on a random city.",
    )
    return parser


def _merge(args: argparse.Namespace, cfg: GeneratorConfig) -> GeneratorConfig:
    overrides = {
        "dim": getattr(args, "dim", None),
        "count": getattr(args, "count", None),
        "start_id": getattr(args, "start_id", None),
        "seed": args.seed,
        "with_filter": getattr(args, "with_filter", None),
    }
    merged = GeneratorConfig(**{k: getattr(cfg, k) for k in overrides})
    for key, value in overrides.items():
        if value is not None:
            setattr(merged, key, value)
    return merged


def run(args: argparse.Namespace, cfg: GeneratorConfig, out: TextIO) -> None:
    if cfg.seed is not None and cfg.seed < 0:
        raise InvalidArgument(f"seed must be non-negative, got {cfg.seed}")
    rng = seed_rng(cfg.seed) if cfg.seed is not None else get_rng()
    if args.command == "points":
        for point in random_points(cfg.count, cfg.dim, start_id=cfg.start_id, rng=rng):
            out.write(json.dumps(point, ensure_ascii=False) + "\n")
    elif args.command == "vector":
        out.write(json.dumps(random_vector(cfg.dim, rng=rng)) + "\n")
    elif args.command == "city":
        out.write(random_city(rng=rng) + "\n")
    elif args.command == "search":
        request = random_search_request(cfg.dim, limit=args.limit, with_filter=cfg.with_filter, rng=rng)
        out.write(json.dumps(request, ensure_ascii=False) + "\n")


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config, config_path = load_config(args.config)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    # stdout carries the generated data.
    configure_logging(config.log_level, json_output=config.json_logs, stream=sys.stderr)
    logger.debug("Loaded config from %s", config_path)
    cfg = _merge(args, config.generator)
    try:
        run(args, cfg, out or sys.stdout)
    except InvalidArgument as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0
