"""Build benchmark points and search requests from the random generators."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np

from bench_data.errors import require_non_negative_int
from bench_data.generators import random_city, random_vector
from bench_data.rng import resolve_rng
from bench_data.utils.logging import get_logger

logger = get_logger(__name__)

Point = Dict[str, Any]


def random_point(point_id: int, dim: int, rng: Optional[np.random.Generator] = None) -> Point:
    rng = resolve_rng(rng)
    return {
        "id": point_id,
        "vector": random_vector(dim, rng=rng),
        "payload": {"city": random_city(rng=rng)},
    }


def random_points(
    count: int,
    dim: int,
    start_id: int = 0,
    rng: Optional[np.random.Generator] = None,
) -> List[Point]:
    """Points with consecutive ids starting at ``start_id``."""
    count = require_non_negative_int(count, "count")
    require_non_negative_int(dim, "dim")
    start_id = require_non_negative_int(start_id, "start_id")
    rng = resolve_rng(rng)
    points = [random_point(start_id + offset, dim, rng=rng) for offset in range(count)]
    logger.debug("Generated %d points (dim=%d, start_id=%d)", count, dim, start_id)
    return points


def random_search_request(
    dim: int,
    limit: int = 10,
    with_filter: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, Any]:
    """
    Search body with a random query vector.

    With ``with_filter`` the request also matches a random city in the payload.
    """
    limit = require_non_negative_int(limit, "limit")
    rng = resolve_rng(rng)
    request: Dict[str, Any] = {"vector": random_vector(dim, rng=rng), "limit": limit}
    if with_filter:
        request["filter"] = {"must": [{"key": "city", "match": {"value": random_city(rng=rng)}}]}
    return request
