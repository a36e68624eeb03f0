"""Errors raised by the gsheets_catalog library.

All errors derive from `SheetsError`, so callers that do not care about
the specific failure can catch a single type. Wrapping always chains the
underlying cause, which is available as `__cause__`.
"""

from __future__ import annotations


class SheetsError(RuntimeError):
    """Base class for all the errors emitted by this library."""


class BadCredentialsError(SheetsError):
    """Cannot set up authentication for the remote source.

    Raised when constructing the data provider and fatal to it.
    """

    def __init__(self, credentials_file_path: str, reason: object):
        super().__init__(f"cannot load credentials from {credentials_file_path}: {reason}")
        self.credentials_file_path = credentials_file_path


class RemoteFetchError(SheetsError):
    """The remote source failed to return the matrix for a location."""

    def __init__(self, location: str, reason: object):
        super().__init__(f"cannot fetch {location}: {reason}")
        self.location = location


class UnknownTableError(SheetsError):
    """The table name is absent from the current metadata mapping."""

    def __init__(self, table_name: str):
        super().__init__(f"data not found for table {table_name}")
        self.table_name = table_name


class MetastoreError(SheetsError):
    """Loading or parsing the metadata sheet failed."""

    def __init__(self, metadata_sheet_id: str, reason: object):
        super().__init__(f"cannot load metadata from {metadata_sheet_id}: {reason}")
        self.metadata_sheet_id = metadata_sheet_id


class TableLoadError(SheetsError):
    """Loading the data of an existing table failed."""

    def __init__(self, table_name: str, location: str, reason: object):
        super().__init__(f"error loading data for table {table_name} from {location}: {reason}")
        self.table_name = table_name
        self.location = location
