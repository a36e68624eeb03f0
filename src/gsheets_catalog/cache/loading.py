"""Module implementing the LoadingCache type."""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Hashable, Mapping
from concurrent.futures import Future
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Generic, TypeVar, cast

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

log = logging.getLogger("cache/loading")


@dataclass(frozen=True, kw_only=True)
class CacheStats:
    """
    Snapshot of the counters of a LoadingCache.

    Attributes:
        hits: lookups served from a live entry.
        misses: lookups that waited for a load (own or shared).
        load_successes: loads that completed successfully.
        load_failures: loads that raised.
        evictions: entries removed to honour the maximum size.
    """

    hits: int = 0
    misses: int = 0
    load_successes: int = 0
    load_failures: int = 0
    evictions: int = 0

    def request_count(self) -> int:
        """Return the total number of lookups."""
        return self.hits + self.misses

    def hit_rate(self) -> float:
        """Return the ratio of lookups served from cache (1.0 when unused)."""
        total = self.request_count()
        return 1.0 if total == 0 else self.hits / total


@dataclass(frozen=True)
class _Entry(Generic[V]):
    value: V
    written_at: float


@dataclass(eq=False)
class _Flight:
    """Load in progress, shared by every caller waiting for it."""

    future: Future = field(default_factory=Future)
    keys: set = field(default_factory=set)
    stale: bool = False


_BULK_FLIGHT = object()
"""Flight key shared by all misses of a cache configured with a bulk loader."""


class LoadingCache(Generic[K, V]):
    """
    Thread-safe, expiring and bounded cache that loads missing values.

    Entries expire `expire_after_write` after they were (re)loaded and
    expiration is checked lazily on access: there is no background
    refresh. When the cache holds more than `maximum_size` entries, it
    evicts the least recently used ones.

    Concurrent lookups of a missing key share a single in-flight load
    (single flight) and all receive the same value or the same exception.
    Failed loads are not stored, so the next lookup tries again.

    When `bulk_loader` is set, the cache never loads a single key: any
    miss runs (or joins) a single load of the whole mapping, which is then
    stored wholesale. Keys absent from the mapping resolve to None, and
    this absence is cached like any other value.

    The internal lock only protects bookkeeping: loaders always run
    without holding it.
    """

    def __init__(
        self,
        *,
        name: str,
        loader: Callable[[K], V] | None = None,
        bulk_loader: Callable[[], Mapping[K, V]] | None = None,
        expire_after_write: timedelta,
        maximum_size: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Parameters:
            name: name used for logging and statistics.
            loader: function loading the value of a single key.
            bulk_loader: function loading the whole key space at once.
            expire_after_write: lifetime of an entry since its load.
            maximum_size: maximum number of entries (zero disables caching).
            clock: monotonic clock returning seconds.

        Raises:
            ValueError: if the configuration is invalid.
        """
        if (loader is None) == (bulk_loader is None):
            raise ValueError("exactly one of loader and bulk_loader must be set")
        if expire_after_write < timedelta(0):
            raise ValueError(f"expire_after_write must be >= 0, got: {expire_after_write}")
        if maximum_size < 0:
            raise ValueError(f"maximum_size must be >= 0, got: {maximum_size}")
        self.name = name
        self._loader = loader
        self._bulk_loader = bulk_loader
        self._ttl = expire_after_write.total_seconds()
        self._maximum_size = maximum_size
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: OrderedDict[K, _Entry[V]] = OrderedDict()
        self._flights: dict[Any, _Flight] = {}
        self._hits = 0
        self._misses = 0
        self._load_successes = 0
        self._load_failures = 0
        self._evictions = 0

    def get(self, key: K) -> V:
        """
        Return the value for key, loading it if missing or expired.

        Raises:
            Whatever exception the loader raised.
        """
        with self._lock:
            entry = self._lookup(key)
            if entry is not None:
                self._hits += 1
                return entry.value
            self._misses += 1
            flight_key = self._flight_key(key)
            flight = self._flights.get(flight_key)
            owner = flight is None
            if flight is None:
                flight = _Flight()
                self._flights[flight_key] = flight
            flight.keys.add(key)

        if owner:
            self._load(flight_key, key, flight)

        # Waiters (and the owner, on failure) get the exception re-raised here
        result = flight.future.result()
        if self._bulk_loader is None:
            return result
        return result.get(key)

    def invalidate(self, key: K) -> None:
        """Discard the entry for key and detach any in-flight load for it."""
        with self._lock:
            self._entries.pop(key, None)
            flight = self._flights.pop(self._flight_key(key), None)
            if flight is not None:
                flight.stale = True

    def invalidate_all(self) -> None:
        """Discard all the entries and detach all the in-flight loads."""
        with self._lock:
            self._entries.clear()
            for flight in self._flights.values():
                flight.stale = True
            self._flights.clear()

    def stats(self) -> CacheStats:
        """Return a snapshot of the cache counters."""
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                load_successes=self._load_successes,
                load_failures=self._load_failures,
                evictions=self._evictions,
            )

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return self._lookup(key) is not None

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired()
            return len(self._entries)

    def _flight_key(self, key: K) -> Any:
        return _BULK_FLIGHT if self._bulk_loader is not None else key

    def _load(self, flight_key: Any, key: K, flight: _Flight) -> None:
        log.debug("%s: loading %r... start", self.name, key)
        try:
            if self._loader is not None:
                loaded: Any = self._loader(key)
            else:
                bulk_loader = cast(Callable[[], Mapping[K, V]], self._bulk_loader)
                loaded = dict(bulk_loader())
        except BaseException as exc:
            with self._lock:
                self._load_failures += 1
                if self._flights.get(flight_key) is flight:
                    del self._flights[flight_key]
            log.warning("%s: loading %r... failure: %s", self.name, key, exc)
            flight.future.set_exception(exc)
            if not isinstance(exc, Exception):
                raise
            return

        with self._lock:
            self._load_successes += 1
            if self._flights.get(flight_key) is flight:
                del self._flights[flight_key]
            if not flight.stale:
                now = self._clock()
                if self._bulk_loader is not None:
                    for each_key, value in loaded.items():
                        self._store(each_key, value, now)
                    # Store the requested keys last so eviction spares them
                    for each_key in flight.keys:
                        self._store(each_key, loaded.get(each_key), now)
                else:
                    self._store(key, loaded, now)
        log.debug("%s: loading %r... ok", self.name, key)
        flight.future.set_result(loaded)

    def _lookup(self, key: K) -> _Entry[V] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._is_expired(entry, self._clock()):
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return entry

    def _is_expired(self, entry: _Entry[V], now: float) -> bool:
        return now - entry.written_at >= self._ttl

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if self._is_expired(entry, now)]
        for key in expired:
            del self._entries[key]

    def _store(self, key: K, value: V, now: float) -> None:
        if self._maximum_size <= 0:
            return
        self._entries[key] = _Entry(value=value, written_at=now)
        self._entries.move_to_end(key)
        while len(self._entries) > self._maximum_size:
            evicted, _ = self._entries.popitem(last=False)
            self._evictions += 1
            log.debug("%s: evicted %r", self.name, evicted)
