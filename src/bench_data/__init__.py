"""
Random benchmark data for vector-search services.

Provides:
- Uniform random vectors and city payloads
- Point and search-request builders
- An integration-test runner that cleans its caches on exit
"""

from bench_data.errors import BenchDataError, InvalidArgument
from bench_data.generators import CITIES, random_city, random_vector
from bench_data.points import random_point, random_points, random_search_request

__all__ = [
    "BenchDataError",
    "InvalidArgument",
    "CITIES",
    "random_city",
    "random_vector",
    "random_point",
    "random_points",
    "random_search_request",
]
