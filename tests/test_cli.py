import io
import json
import logging

import pytest

from bench_data import CITIES
from bench_data.cli import main


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.delenv("BENCH_DATA_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield tmp_path
    root.handlers = handlers
    root.setLevel(level)


def _run(*argv: str) -> tuple[int, str]:
    out = io.StringIO()
    code = main(list(argv), out=out)
    return code, out.getvalue()


def test_points_emits_json_lines() -> None:
    code, output = _run("--seed", "3", "points", "--dim", "2", "--count", "3", "--start-id", "10")
    assert code == 0
    points = [json.loads(line) for line in output.splitlines()]
    assert [p["id"] for p in points] == [10, 11, 12]
    assert all(len(p["vector"]) == 2 for p in points)
    assert all(p["payload"]["city"] in CITIES for p in points)


def test_seed_makes_output_reproducible() -> None:
    assert _run("--seed", "8", "points", "--dim", "4", "--count", "2") == _run(
        "--seed", "8", "points", "--dim", "4", "--count", "2"
    )


def test_vector_and_city_commands() -> None:
    code, output = _run("vector", "--dim", "5")
    assert code == 0
    assert len(json.loads(output)) == 5
    code, output = _run("city")
    assert code == 0
    assert output.strip() in CITIES


def test_search_command_with_filter() -> None:
    code, output = _run("search", "--dim", "3", "--limit", "4", "--with-filter")
    request = json.loads(output)
    assert code == 0
    assert request["limit"] == 4
    assert request["filter"]["must"][0]["key"] == "city"


def test_config_supplies_defaults(isolated_config) -> None:
    (isolated_config / "bench-data.json").write_text(json.dumps({"generator": {"dim": 7, "count": 2}}))
    code, output = _run("points")
    assert code == 0
    points = [json.loads(line) for line in output.splitlines()]
    assert len(points) == 2
    assert all(len(p["vector"]) == 7 for p in points)


def test_invalid_argument_exits_with_two(capsys) -> None:
    code, output = _run("vector", "--dim", "-1")
    assert code == 2
    assert output == ""
    assert "length must be non-negative" in capsys.readouterr().err


def test_invalid_config_exits_with_two(isolated_config, capsys) -> None:
    (isolated_config / "bench-data.json").write_text(json.dumps({"generator": {"dim": -1}}))
    code, output = _run("city")
    assert code == 2
    assert output == ""
    assert "generator.dim must be non-negative" in capsys.readouterr().err


def test_negative_start_id_exits_with_two(capsys) -> None:
    code, output = _run("points", "--dim", "2", "--count", "1", "--start-id", "-5")
    assert code == 2
    assert output == ""
    assert "start_id must be non-negative" in capsys.readouterr().err
