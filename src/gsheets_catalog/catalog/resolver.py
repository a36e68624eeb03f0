"""Module resolving table names to sheet location expressions."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta

from ..cache import CacheStats, LoadingCache
from ..remote import RowMatrix
from .data import SheetDataCache

log = logging.getLogger("catalog/resolver")


def parse_table_names(matrix: RowMatrix) -> frozenset[str]:
    """
    Return the table names declared by the metadata matrix.

    The first row is the header and is skipped. Every other non-empty
    row contributes its first cell, even when it lacks a location.
    """
    return frozenset(str(row[0]) for row in matrix[1:] if len(row) > 0)


def parse_table_mapping(matrix: RowMatrix) -> dict[str, str]:
    """
    Return the table name to location expression mapping.

    The first row is the header and is skipped. Rows with fewer than
    two cells are skipped. When a name appears twice, the last row wins.
    """
    mapping: dict[str, str] = {}
    for row in matrix[1:]:
        if len(row) >= 2:
            mapping[str(row[0])] = str(row[1])
    return mapping


class TableLocationCache:
    """
    Cache mapping a table name to its location expression.

    A miss never loads a single name: it reads and parses the whole
    metadata sheet (through the data cache) and stores every mapping it
    declares. Concurrent misses, even for distinct names, share the same
    load. Unknown names resolve to None until their entry expires.
    """

    def __init__(
        self,
        data_cache: SheetDataCache,
        metadata_sheet_id: str,
        *,
        expire_after_write: timedelta,
        maximum_size: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._data_cache = data_cache
        self.metadata_sheet_id = metadata_sheet_id
        self._cache: LoadingCache[str, str | None] = LoadingCache(
            name="table-location",
            bulk_loader=self.get_all_mappings,
            expire_after_write=expire_after_write,
            maximum_size=maximum_size,
            clock=clock,
        )

    def get(self, table_name: str) -> str | None:
        """
        Return the location expression for the table or None if unknown.

        Raises:
            RemoteFetchError: if loading the metadata sheet fails.
        """
        return self._cache.get(table_name)

    def get_all_mappings(self) -> dict[str, str]:
        """Read the metadata sheet and return all its table mappings."""
        matrix = self._data_cache.get(self.metadata_sheet_id)
        mapping = parse_table_mapping(matrix)
        log.info("loaded %d table mappings from %s", len(mapping), self.metadata_sheet_id)
        return mapping

    def invalidate_all(self) -> None:
        self._cache.invalidate_all()

    def stats(self) -> CacheStats:
        return self._cache.stats()
