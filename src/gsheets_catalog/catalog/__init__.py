"""Package implementing the two-tier catalog cache.

The catalog resolves data in two steps:

    table name --(TableLocationCache)--> location expression
    location expression --(SheetDataCache)--> values matrix

The metadata sheet, which declares the table name to location mapping,
is itself read through the `SheetDataCache`. Its layout is:

    | table     | location                 |   <- header, skipped
    | orders    | abc123                   |
    | users     | def456#Sheet1!A1:C100    |
    | pending   |                          |   <- listed, not mapped

A row with a name but no location is listed as a table but cannot be
read until someone wires it to a location.
"""

from .data import SheetDataCache
from .resolver import TableLocationCache, parse_table_mapping, parse_table_names

__all__ = [
    "SheetDataCache",
    "TableLocationCache",
    "parse_table_mapping",
    "parse_table_names",
]
