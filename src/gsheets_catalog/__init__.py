"""Google Sheets catalog library.

This library exposes the tables declared by a Google Sheets "metadata"
sheet, caching both the name to location mapping and the table values
so that repeated reads do not hit the remote API.
"""

from importlib.metadata import PackageNotFoundError, version

from .config import SheetsConfig, load_sheets_config
from .errors import (
    BadCredentialsError,
    MetastoreError,
    RemoteFetchError,
    SheetsError,
    TableLoadError,
    UnknownTableError,
)
from .provider import SheetsDataProvider

try:
    __version__ = version("gsheets-catalog")
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0"

__all__ = [
    "BadCredentialsError",
    "MetastoreError",
    "RemoteFetchError",
    "SheetsConfig",
    "SheetsDataProvider",
    "SheetsError",
    "TableLoadError",
    "UnknownTableError",
    "load_sheets_config",
    "__version__",
]
