"""Module implementing the cache of sheet values."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta

from ..cache import CacheStats, LoadingCache
from ..remote import RowMatrix, SheetsRemoteSource


class SheetDataCache:
    """
    Cache mapping a location expression to the values it selects.

    Each location is loaded independently by the remote source, so two
    expressions pointing to the same spreadsheet with different ranges
    are two distinct entries. A failed fetch propagates the source's
    RemoteFetchError to every caller waiting for it and is not cached.
    """

    def __init__(
        self,
        source: SheetsRemoteSource,
        *,
        expire_after_write: timedelta,
        maximum_size: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._cache: LoadingCache[str, RowMatrix] = LoadingCache(
            name="sheet-data",
            loader=source.fetch,
            expire_after_write=expire_after_write,
            maximum_size=maximum_size,
            clock=clock,
        )

    def get(self, expr: str) -> RowMatrix:
        """Return the values for the location expression, fetching on miss."""
        return self._cache.get(expr)

    def invalidate(self, expr: str) -> None:
        self._cache.invalidate(expr)

    def invalidate_all(self) -> None:
        self._cache.invalidate_all()

    def stats(self) -> CacheStats:
        return self._cache.stats()
