"""Run a single integration test file and always remove pytest's cache dirs afterwards."""

from __future__ import annotations

import argparse
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from bench_data.config import DEFAULT_CACHE_DIRS, load_config
from bench_data.utils.cleanup import CleanupManager
from bench_data.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def clear_caches(workdir: Path, cache_dirs: Iterable[str]) -> None:
    for name in cache_dirs:
        target = Path(workdir) / name
        if target.exists():
            shutil.rmtree(target)
            logger.info("Removed %s", target)


def run_integration_tests(
    test_file: str,
    workdir: Path,
    cache_dirs: Sequence[str] = DEFAULT_CACHE_DIRS,
    pytest_args: Sequence[str] = ("-s",),
    python: str = sys.executable,
) -> int:
    """
    Run ``python -m pytest <pytest_args> <test_file>`` from ``workdir``.

    Returns pytest's exit code. Cache dirs are removed and the previous cwd is
    restored whether the run passes, fails or raises.
    """
    workdir = Path(workdir).resolve()
    previous_cwd = Path.cwd()
    cmd: List[str] = [python, "-m", "pytest", *pytest_args, test_file]
    with CleanupManager() as cleanup:
        cleanup.register(lambda: os.chdir(previous_cwd))
        cleanup.register(lambda: clear_caches(workdir, cache_dirs))
        os.chdir(workdir)
        logger.info("Running %s in %s", " ".join(cmd), workdir)
        returncode = subprocess.run(cmd, check=False).returncode
    if returncode == 0:
        logger.info("Integration tests passed")
    else:
        logger.error("Integration tests failed with exit code %d", returncode)
    return returncode


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse runner options; everything after the first ``--`` goes to pytest untouched."""
    tokens = list(sys.argv[1:] if argv is None else argv)
    extra: List[str] = []
    if "--" in tokens:
        split = tokens.index("--")
        tokens, extra = tokens[:split], tokens[split + 1 :]
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("test_file", nargs="?", help="Test file to run (overrides config).")
    parser.add_argument(
        "--workdir",
        type=Path,
        help="Directory to run from (defaults to the current directory).",
    )
    parser.add_argument("--config", type=Path, help="Path to a bench-data JSON config.")
    args = parser.parse_args(tokens)
    args.pytest_args = extra
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config, config_path = load_config(args.config)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    configure_logging(config.log_level, json_output=config.json_logs)
    logger.debug("Loaded config from %s", config_path)
    runner_cfg = config.runner
    return run_integration_tests(
        test_file=args.test_file or runner_cfg.test_file,
        workdir=args.workdir or Path.cwd(),
        cache_dirs=runner_cfg.cache_dirs,
        pytest_args=[*runner_cfg.pytest_args, *args.pytest_args],
    )


if __name__ == "__main__":
    sys.exit(main())
