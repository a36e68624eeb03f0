"""Optional scripting helpers to survive per-table failures and compute exit codes."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from ..errors import SheetsError

log = logging.getLogger("scripting")


class Interceptor:
    """
    Intercept the library errors raised while processing tables.

    Use as follows:

        interceptor = sheets_exception.Interceptor()
        for table in tables:
            with interceptor.table(table):
                provider.read_all_values(table)
        sys.exit(interceptor.exitcode())

    SheetsError exceptions are logged, recorded and suppressed so that
    the remaining tables are still processed. Any other exception is a
    bug and propagates.
    """

    def __init__(self):
        self.failures: dict[str, SheetsError] = {}

    @property
    def failed(self) -> bool:
        """Whether at least one table failed."""
        return bool(self.failures)

    @contextmanager
    def table(self, table_name: str) -> Iterator[None]:
        """Context manager intercepting the errors for the given table."""
        try:
            yield
        except SheetsError as exc:
            log.error("processing %s... failure: %s", table_name, exc)
            self.failures[table_name] = exc

    def exitcode(self) -> int:
        """
        Return the exitcode to pass to sys.exit.

        Zero on success, 1 on failure.
        """
        return int(self.failed)
