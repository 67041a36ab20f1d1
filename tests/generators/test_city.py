from collections import Counter

import numpy as np

from bench_data import CITIES, random_city


def test_city_list_is_fixed_and_distinct() -> None:
    assert isinstance(CITIES, tuple)
    assert len(CITIES) == 50
    assert len(set(CITIES)) == 50
    assert CITIES[0] == "Tokyo"
    assert CITIES[1] == "Delhi"
    assert CITIES[-1] == "Hangzhou"
    assert "São Paulo" in CITIES
    assert "Bogotá" in CITIES
    assert "Xi'an" in CITIES


def test_random_city_returns_member() -> None:
    for _ in range(200):
        city = random_city()
        assert city
        assert city in CITIES


def test_random_city_covers_all_names_uniformly() -> None:
    rng = np.random.default_rng(2024)
    counts = Counter(random_city(rng=rng) for _ in range(10_000))
    assert set(counts) == set(CITIES)
    # Expected 200 per city; the band is roughly +/- 5 sigma.
    for city in CITIES:
        assert 130 <= counts[city] <= 270, city


def test_first_and_last_city_are_not_underweighted() -> None:
    rng = np.random.default_rng(7)
    counts = Counter(random_city(rng=rng) for _ in range(50_000))
    # Rounding a scaled draw would give the ends ~500 hits each instead of ~1000.
    assert counts[CITIES[0]] > 850
    assert counts[CITIES[-1]] > 850


def test_random_city_uses_explicit_generator() -> None:
    a = [random_city(rng=np.random.default_rng(11)) for _ in range(3)]
    b = [random_city(rng=np.random.default_rng(11)) for _ in range(3)]
    assert a == b
