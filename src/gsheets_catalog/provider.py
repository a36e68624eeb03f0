"""Module implementing the SheetsDataProvider type."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .cache import CacheStats
from .catalog import SheetDataCache, TableLocationCache, parse_table_names
from .config import SheetsConfig
from .errors import MetastoreError, RemoteFetchError, TableLoadError, UnknownTableError
from .remote import RowMatrix, SheetsClient, SheetsRemoteSource

log = logging.getLogger("provider")


class SheetsDataProvider:
    """
    Component exposing the tables declared by a metadata sheet.

    The provider owns the remote client and both caches. It is safe to use
    from multiple threads: the caches coordinate concurrent loads so that
    simultaneous requests for the same data cost a single remote fetch.
    """

    def __init__(
        self,
        config: SheetsConfig,
        *,
        client: SheetsRemoteSource | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the provider.

        Parameters:
            config: the provider configuration.
            client: optional remote source. When None, we create a
                SheetsClient using `config.credentials_file_path`.
            clock: monotonic clock used to expire cache entries.

        Raises:
            BadCredentialsError: if we cannot create the client.
        """
        self.metadata_sheet_id = config.metadata_sheet_id
        if client is None:
            client = SheetsClient.from_credentials_file(config.credentials_file_path)
        self.client = client
        self.data_cache = SheetDataCache(
            client,
            expire_after_write=config.cache_expire_after_write,
            maximum_size=config.cache_maximum_size,
            clock=clock,
        )
        self.location_cache = TableLocationCache(
            self.data_cache,
            config.metadata_sheet_id,
            expire_after_write=config.cache_expire_after_write,
            maximum_size=config.cache_maximum_size,
            clock=clock,
        )

    def list_tables(self) -> frozenset[str]:
        """
        Return the names of the tables declared by the metadata sheet.

        Raises:
            MetastoreError: if we cannot load the metadata sheet.
        """
        try:
            matrix = self.data_cache.get(self.metadata_sheet_id)
        except RemoteFetchError as exc:
            raise MetastoreError(self.metadata_sheet_id, exc) from exc
        return parse_table_names(matrix)

    def read_all_values(self, table_name: str) -> RowMatrix:
        """
        Return all the values of the given table.

        Raises:
            MetastoreError: if we cannot load the metadata sheet.
            UnknownTableError: if no location is declared for the table.
            TableLoadError: if we cannot load the table values.
        """
        try:
            location = self.location_cache.get(table_name)
        except RemoteFetchError as exc:
            raise MetastoreError(self.metadata_sheet_id, exc) from exc
        if location is None:
            raise UnknownTableError(table_name)

        try:
            return self.data_cache.get(location)
        except RemoteFetchError as exc:
            raise TableLoadError(table_name, location, exc) from exc

    def invalidate(self) -> None:
        """Drop all the cached data so the next calls reload it."""
        log.info("invalidating the caches")
        self.location_cache.invalidate_all()
        self.data_cache.invalidate_all()

    def cache_stats(self) -> dict[str, CacheStats]:
        """Return the statistics of both caches keyed by cache name."""
        return {
            "table-location": self.location_cache.stats(),
            "sheet-data": self.data_cache.stats(),
        }
