"""Package implementing the in-memory caches of the catalog.

The `LoadingCache` type is a keyed cache that loads missing values on
demand. It provides:

1. *expire after write*: an entry lives for a fixed duration after it
   has been (re)loaded. Expiration is lazy: the first lookup after the
   deadline triggers a synchronous reload.

2. *maximum size*: when the cache grows beyond the configured number of
   entries, it evicts the least recently used ones.

3. *single flight*: concurrent lookups of the same missing key share one
   load. Failures are handed to every waiter and are not stored.

4. *bulk loading*: a cache built with a `bulk_loader` populates the whole
   key space with one load, so that N concurrent misses on N distinct
   keys still cost a single remote call.

Both caches of the catalog (table name to location, location to values)
are `LoadingCache` instances with independent configuration.
"""

from .loading import CacheStats, LoadingCache

__all__ = [
    "CacheStats",
    "LoadingCache",
]
