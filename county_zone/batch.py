"""
Batch Resolver Module
=====================

Stateless parallel map for bulk lookups.

Design:
- One result slot per input index (output order == input order)
- Contiguous chunks fanned out over a ThreadPoolExecutor
- No shared mutable state: the resolve function must only read
- No early termination: every element is resolved
- A malformed element yields None in its own slot, siblings are unaffected
"""

import logging
import math
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def default_workers() -> int:
    """Worker count matching available hardware parallelism."""
    return os.cpu_count() or 1


class BatchResolver(Generic[T, R]):
    """
    Parallel map with index-preserving results.

    Usage:
        resolver = BatchResolver(index.resolve, max_workers=4)
        names = resolver.map(points)  # names[i] belongs to points[i]

    Thread Safety:
        The resolver holds no mutable state. resolve_fn is called from
        several threads at once and must not mutate shared data.
    """

    def __init__(
        self,
        resolve_fn: Callable[[T], Optional[R]],
        max_workers: Optional[int] = None
    ):
        """
        Args:
            resolve_fn: Single-element lookup
            max_workers: Pool size (default: os.cpu_count())
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self._resolve_fn = resolve_fn
        self.max_workers = max_workers or default_workers()

    def _resolve_one(self, position: int, item: T) -> Optional[R]:
        try:
            return self._resolve_fn(item)
        except (TypeError, ValueError) as e:
            logger.warning(f"Batch element {position} could not be resolved: {e}")
            return None

    def _resolve_chunk(self, start: int, chunk: Sequence[T]) -> List[Optional[R]]:
        return [
            self._resolve_one(start + offset, item)
            for offset, item in enumerate(chunk)
        ]

    def map(self, items: Sequence[T]) -> List[Optional[R]]:
        """
        Resolve every item, in parallel.

        Args:
            items: Ordered inputs

        Returns:
            List of the same length where result[i] belongs to items[i]
        """
        items = list(items)
        if not items:
            return []

        workers = min(self.max_workers, len(items))
        if workers == 1:
            return self._resolve_chunk(0, items)

        # A few chunks per worker keeps the pool busy when chunk costs differ
        chunk_size = max(1, math.ceil(len(items) / (workers * 4)))
        results: List[Optional[R]] = [None] * len(items)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="BatchResolver") as pool:
            futures = {
                start: pool.submit(self._resolve_chunk, start, items[start:start + chunk_size])
                for start in range(0, len(items), chunk_size)
            }
            for start, future in futures.items():
                chunk_results = future.result()
                results[start:start + len(chunk_results)] = chunk_results

        logger.debug(f"Resolved batch of {len(items)} items with {workers} workers")
        return results
