"""Module containing the catalog configuration and its YAML loader.

A configuration file looks like the following:

    version: 0
    credentials_file_path: /etc/gsheets/service-account.json
    metadata_sheet_id: 1Es4HhWALUQjoa-bQh4a8B5HROz7dpGMfq_HbfoaW5LM
    cache_expire_after_write: 5m
    cache_maximum_size: 1000

Durations are numbers (seconds) or strings made of a number and one of
the `ms`, `s`, `m`, `h`, `d` units.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Final

import dacite
import yaml

DEFAULT_EXPIRE_AFTER_WRITE: Final[timedelta] = timedelta(minutes=5)
DEFAULT_MAXIMUM_SIZE: Final[int] = 1000

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h|d)\s*$")

_DURATION_UNITS = {
    "ms": "milliseconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


class SheetsConfigError(ValueError):
    """Error emitted when the configuration is missing or invalid."""


@dataclass(frozen=True, kw_only=True)
class SheetsConfig:
    """
    Configuration of the SheetsDataProvider.

    Attributes:
        credentials_file_path: path to the service account JSON key.
        metadata_sheet_id: location of the sheet mapping table names to locations.
        cache_expire_after_write: lifetime of the cache entries.
        cache_maximum_size: maximum number of entries of each cache.
        version: version of the configuration format.
    """

    credentials_file_path: str
    metadata_sheet_id: str
    cache_expire_after_write: timedelta = DEFAULT_EXPIRE_AFTER_WRITE
    cache_maximum_size: int = DEFAULT_MAXIMUM_SIZE
    version: int = 0

    def __post_init__(self):
        if self.version != 0:
            raise SheetsConfigError(f"Unsupported config version: {self.version} (only 0 supported)")
        if not self.metadata_sheet_id:
            raise SheetsConfigError("metadata_sheet_id must not be empty")
        if self.cache_expire_after_write < timedelta(0):
            raise SheetsConfigError("cache_expire_after_write must not be negative")
        if self.cache_maximum_size < 0:
            raise SheetsConfigError("cache_maximum_size must not be negative")


def parse_duration(value: object) -> timedelta:
    """
    Parse a duration such as `500ms`, `30s`, `5m`, `2h`, `1d` or a number of seconds.

    Raises:
        ValueError: if the value is not a valid duration.
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    if isinstance(value, str):
        match = _DURATION_RE.match(value)
        if match is not None:
            amount, unit = match.groups()
            return timedelta(**{_DURATION_UNITS[unit]: float(amount)})
    raise ValueError(f"Invalid duration: {value!r} (expected e.g. 30s, 5m, 2h)")


def sheets_config_from_dict(data: dict) -> SheetsConfig:
    """
    Convert a mapping into a SheetsConfig.

    Raises:
        SheetsConfigError: if fields are missing or have the wrong types.
    """
    try:
        return dacite.from_dict(
            SheetsConfig,
            data,
            config=dacite.Config(type_hooks={timedelta: parse_duration}, strict=True),
        )
    except (dacite.DaciteError, TypeError, ValueError) as exc:
        if isinstance(exc, SheetsConfigError):
            raise
        raise SheetsConfigError(f"Invalid config: {exc}") from exc


def load_sheets_config(config_path: str | Path) -> SheetsConfig:
    """
    Load the configuration from a YAML file.

    Raises:
        SheetsConfigError: if the file is missing, is not valid YAML or
            does not contain a valid configuration.
    """
    path = Path(config_path)
    try:
        content = path.read_text()
    except FileNotFoundError as exc:
        raise SheetsConfigError(f"Config not found: {path}") from exc

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise SheetsConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise SheetsConfigError(f"Config must be a mapping: {path}")

    return sheets_config_from_dict(data)
