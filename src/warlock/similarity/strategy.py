"""Scoring strategy - decides whether a metric fans its inner loop out to workers."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConcurrencyMode(Enum):
    """How metrics may spread their inner loops over workers."""

    AUTO = "auto"  # Fan out only past the per-metric size and chunk thresholds
    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"  # Fan out regardless of input size


class ScoringStrategy:
    """Owns the worker pool for a single ranking call.

    Metrics ask ``should_fan_out`` with their input sizes and, when it says
    yes, hand independent chunks of work to ``map``. The pool is created
    lazily and torn down on ``close`` (or when leaving the ``with`` block),
    so it never outlives the call that opened it.
    """

    def __init__(
        self,
        mode: ConcurrencyMode = ConcurrencyMode.SEQUENTIAL,
        max_workers: int | None = None,
    ) -> None:
        """Initialize the strategy.

        Args:
            mode: Concurrency mode
            max_workers: Worker pool size, defaults to the CPU count
        """
        self.mode = mode
        self.max_workers = max_workers or os.cpu_count() or 1
        self._executor: ThreadPoolExecutor | None = None

    def __enter__(self) -> ScoringStrategy:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Shut the worker pool down, waiting for outstanding work."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            logger.debug("Scoring worker pool shut down")

    def should_fan_out(self, size_a: int, size_b: int, min_size: int) -> bool:
        """Check whether inputs of these sizes should be split across workers.

        Args:
            size_a: Length of the first input
            size_b: Length of the second input
            min_size: Both inputs must be longer than this in AUTO mode

        Returns:
            True if the metric should use its concurrent path
        """
        if self.mode is ConcurrencyMode.SEQUENTIAL:
            return False
        if self.mode is ConcurrencyMode.CONCURRENT:
            return True
        return self.max_workers > 1 and size_a > min_size and size_b > min_size

    def split(self, start: int, stop: int, min_chunk: int = 1) -> list[range]:
        """Split [start, stop) into at most max_workers contiguous ranges.

        In AUTO mode each range holds at least ``min_chunk`` items, so short
        spans come back as a single range and run inline.
        """
        total = stop - start
        if total <= 0:
            return []

        if self.mode is not ConcurrencyMode.AUTO:
            min_chunk = 1
        count = max(1, min(self.max_workers, total // min_chunk))
        size, extra = divmod(total, count)
        ranges = []
        lo = start
        for n in range(count):
            hi = lo + size + (1 if n < extra else 0)
            ranges.append(range(lo, hi))
            lo = hi
        return ranges

    def map(self, fn: Callable[[T], Any], items: Iterable[T]) -> list[Any]:
        """Run fn over items on the pool and wait for every result.

        Results come back in input order. A single item runs inline.
        """
        items = list(items)
        if len(items) <= 1 or self.mode is ConcurrencyMode.SEQUENTIAL:
            return [fn(item) for item in items]

        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix="warlock-score",
            )
            logger.debug(f"Started scoring worker pool with {self.max_workers} workers")

        return list(self._executor.map(fn, items))


# Never starts a pool, so one instance can be shared.
SEQUENTIAL = ScoringStrategy(ConcurrencyMode.SEQUENTIAL, max_workers=1)
