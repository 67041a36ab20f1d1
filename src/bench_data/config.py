"""Configuration for the data CLI and the integration-test runner."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

CONFIG_ENV_VAR = "BENCH_DATA_CONFIG"
CONFIG_FILENAME = "bench-data.json"

DEFAULT_TEST_FILE = "openapi_integration/test_nested_payload_indexing.py"
DEFAULT_CACHE_DIRS: Tuple[str, ...] = (".hypothesis", ".pytest_cache")


def _check_keys(section: str, data: Mapping[str, Any], allowed: Tuple[str, ...]) -> None:
    for key in data:
        if key not in allowed:
            raise ValueError(f"Unknown {section} key '{key}'")


def _bool(section: str, key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{section}.{key} must be true or false")
    return value


def _non_negative_int(section: str, key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{section}.{key} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{section}.{key} must be an integer") from exc
    if number < 0:
        raise ValueError(f"{section}.{key} must be non-negative")
    return number


@dataclass
class GeneratorConfig:
    dim: int = 4
    count: int = 10
    start_id: int = 0
    seed: Optional[int] = None
    with_filter: bool = False

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "GeneratorConfig":
        if not data:
            return cls()
        _check_keys("generator", data, ("dim", "count", "start_id", "seed", "with_filter"))
        kwargs: Dict[str, Any] = {}
        for key in ("dim", "count", "start_id"):
            if key in data:
                kwargs[key] = _non_negative_int("generator", key, data[key])
        if data.get("seed") is not None:
            kwargs["seed"] = _non_negative_int("generator", "seed", data["seed"])
        if "with_filter" in data:
            kwargs["with_filter"] = _bool("generator", "with_filter", data["with_filter"])
        return cls(**kwargs)


@dataclass
class RunnerConfig:
    test_file: str = DEFAULT_TEST_FILE
    cache_dirs: Tuple[str, ...] = DEFAULT_CACHE_DIRS
    pytest_args: Tuple[str, ...] = ("-s",)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RunnerConfig":
        if not data:
            return cls()
        _check_keys("runner", data, ("test_file", "cache_dirs", "pytest_args"))
        kwargs: Dict[str, Any] = {}
        if "test_file" in data:
            test_file = str(data["test_file"]).strip()
            if not test_file:
                raise ValueError("runner.test_file cannot be empty")
            kwargs["test_file"] = test_file
        for key in ("cache_dirs", "pytest_args"):
            if key in data:
                value = data[key]
                if isinstance(value, str) or not isinstance(value, (list, tuple)):
                    raise ValueError(f"runner.{key} must be a list of strings")
                kwargs[key] = tuple(str(v) for v in value)
        for cache_dir in kwargs.get("cache_dirs", ()):
            # Cache dirs are removed recursively; keep them inside the work dir.
            if not cache_dir or Path(cache_dir).is_absolute() or ".." in Path(cache_dir).parts:
                raise ValueError(f"runner.cache_dirs entry '{cache_dir}' must be a relative path")
        return cls(**kwargs)


@dataclass
class BenchDataConfig:
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    runner: RunnerConfig = field(default_factory=RunnerConfig)
    log_level: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_file(cls, path: Path) -> "BenchDataConfig":
        return cls.from_dict(json.loads(Path(path).read_text()))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BenchDataConfig":
        if not isinstance(data, Mapping):
            raise ValueError("Config root must be a JSON object")
        _check_keys("config", data, ("generator", "runner", "log_level", "json_logs"))
        log_level = data.get("log_level")
        if log_level is not None:
            log_level = str(log_level).upper()
            if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
                raise ValueError(f"Unknown log level '{log_level}'")
        return cls(
            generator=GeneratorConfig.from_mapping(data.get("generator")),
            runner=RunnerConfig.from_mapping(data.get("runner")),
            log_level=log_level,
            json_logs=_bool("config", "json_logs", data.get("json_logs", False)),
        )


def resolve_config_path(explicit: Optional[Path] = None) -> Path:
    """Resolve the config path: explicit argument, then $BENCH_DATA_CONFIG, then ./bench-data.json."""
    if explicit is not None:
        candidate = Path(explicit)
    else:
        env_value = os.getenv(CONFIG_ENV_VAR)
        candidate = Path(env_value) if env_value else Path(CONFIG_FILENAME)
    if not candidate.is_absolute():
        candidate = Path.cwd() / candidate
    return candidate.resolve()


def load_config(explicit: Optional[Path] = None) -> Tuple[BenchDataConfig, Path]:
    """
    Load the config, falling back to defaults when the file does not exist.

    Returns:
        (config, resolved_path)

    Raises:
        ValueError: if the JSON is invalid or holds unknown/invalid settings.
    """
    path = resolve_config_path(explicit)
    if not path.exists():
        return BenchDataConfig(), path
    try:
        return BenchDataConfig.from_file(path), path
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid config JSON at {path}: {exc}") from exc
