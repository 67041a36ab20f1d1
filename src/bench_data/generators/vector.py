"""Uniform random vectors."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from bench_data.errors import require_non_negative_int
from bench_data.rng import resolve_rng


def random_vector(length: int, rng: Optional[np.random.Generator] = None) -> List[float]:
    """
    Return ``length`` independent floats drawn uniformly from [0, 1).

    Raises:
        InvalidArgument: if length is negative or not an integer.
    """
    length = require_non_negative_int(length, "length")
    if length == 0:
        return []
    return resolve_rng(rng).random(length).tolist()
