"""Package for reading raw value matrices from Google Sheets.

A location expression selects what to read. It is either a bare
spreadsheet id, in which case we read `DEFAULT_RANGE`, or a spreadsheet
id followed by `#` and an A1-style range:

    1Es4HhWALUQjoa-bQh4a8B5HROz7dpGMfq_HbfoaW5LM
    1Es4HhWALUQjoa-bQh4a8B5HROz7dpGMfq_HbfoaW5LM#Sheet1!A1:C100

Each call to `SheetsClient.fetch` issues exactly one read request. There
is no retry and no caching at this layer: see `gsheets_catalog.catalog`
for the caches sitting on top of the client.
"""

from .client import SHEETS_READONLY_SCOPE, RowMatrix, SheetsClient, SheetsRemoteSource
from .location import DEFAULT_RANGE, SheetLocation

__all__ = [
    "DEFAULT_RANGE",
    "RowMatrix",
    "SHEETS_READONLY_SCOPE",
    "SheetLocation",
    "SheetsClient",
    "SheetsRemoteSource",
]
