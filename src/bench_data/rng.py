"""Per-thread numpy random generators."""

from __future__ import annotations

import os
import threading
from typing import Optional

import numpy as np

from bench_data.errors import InvalidArgument
from bench_data.utils.logging import get_logger

SEED_ENV_VAR = "BENCH_DATA_SEED"

logger = get_logger(__name__)
_local = threading.local()


def _seed_from_env() -> Optional[int]:
    raw = os.getenv(SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        seed = int(raw)
    except ValueError as exc:
        raise InvalidArgument(f"{SEED_ENV_VAR} must be an integer, got {raw!r}") from exc
    if seed < 0:
        raise InvalidArgument(f"{SEED_ENV_VAR} must be non-negative, got {seed}")
    return seed


def seed_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Replace the calling thread's generator. ``None`` draws fresh OS entropy."""
    rng = np.random.default_rng(seed)
    _local.rng = rng
    logger.debug("Seeded generator for thread %s (seed=%s)", threading.get_ident(), seed)
    return rng


def get_rng() -> np.random.Generator:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = seed_rng(_seed_from_env())
    return rng


def resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else get_rng()
