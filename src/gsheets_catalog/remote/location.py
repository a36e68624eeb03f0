"""Module implementing the sheet location expression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_RANGE: Final[str] = "$1:$10000"
"""Range read when the expression does not name one (10k columns, all rows)."""

LOCATION_SEPARATOR: Final[str] = "#"


@dataclass(frozen=True, kw_only=True)
class SheetLocation:
    """
    Parsed location expression pointing to a range of a spreadsheet.

    The wire format is either `<sheet_id>` or `<sheet_id>#<range>` where
    the range uses the A1 notation (e.g., `Sheet1!A1:C100`).

    Attributes:
        sheet_id: the spreadsheet identifier.
        range: the A1-style range to read.
    """

    sheet_id: str
    range: str = DEFAULT_RANGE

    @classmethod
    def parse(cls, expr: str) -> SheetLocation:
        """
        Parse a location expression.

        Only the first two `#`-separated parts are meaningful: anything
        after a second `#` is ignored. An empty range selects the
        `DEFAULT_RANGE`.

        Raises:
            ValueError: if the sheet id is empty.
        """
        parts = expr.split(LOCATION_SEPARATOR)
        sheet_id = parts[0].strip()
        if not sheet_id:
            raise ValueError(f"Invalid location expression: {expr!r} (empty sheet id)")
        if len(parts) > 1 and parts[1]:
            return cls(sheet_id=sheet_id, range=parts[1])
        return cls(sheet_id=sheet_id)

    def __str__(self) -> str:
        if self.range == DEFAULT_RANGE:
            return self.sheet_id
        return f"{self.sheet_id}{LOCATION_SEPARATOR}{self.range}"
