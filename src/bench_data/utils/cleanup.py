"""Cleanup callbacks that run even when the guarded work fails."""

from __future__ import annotations

from typing import Callable, List

from bench_data.utils.logging import get_logger

logger = get_logger(__name__)


class CleanupManager:
    """Registers cleanup callbacks to run in LIFO order."""

    def __init__(self) -> None:
        self._callbacks: List[Callable[[], None]] = []

    def register(self, cb: Callable[[], None]) -> None:
        self._callbacks.append(cb)

    def run(self) -> None:
        while self._callbacks:
            cb = self._callbacks.pop()
            try:
                cb()
            except Exception:
                logger.warning("Cleanup callback %r failed", cb, exc_info=True)

    def __enter__(self) -> "CleanupManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.run()
