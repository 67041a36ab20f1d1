from .city import CITIES, random_city
from .vector import random_vector

__all__ = [
    "CITIES",
    "random_city",
    "random_vector",
]
