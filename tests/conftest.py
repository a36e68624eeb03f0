"""Shared pytest fixtures for gsheets_catalog tests."""

from __future__ import annotations

import threading

import pytest

from gsheets_catalog.errors import RemoteFetchError

METADATA_SHEET_ID = "meta123"


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSheetsSource:
    """In-memory SheetsRemoteSource recording every fetch."""

    def __init__(self, sheets: dict[str, list[list[object]]]):
        self.sheets = dict(sheets)
        self.failures: dict[str, Exception] = {}
        self.calls: list[str] = []
        self.gate: threading.Event | None = None
        self._lock = threading.Lock()

    def fetch(self, expr: str) -> list[list[object]]:
        with self._lock:
            self.calls.append(expr)
        if self.gate is not None:
            assert self.gate.wait(timeout=10), "gate never opened"
        if expr in self.failures:
            raise self.failures[expr]
        try:
            return self.sheets[expr]
        except KeyError as exc:
            raise RemoteFetchError(expr, "no such sheet") from exc

    def count(self, expr: str) -> int:
        with self._lock:
            return self.calls.count(expr)


@pytest.fixture
def clock() -> FakeClock:
    """Return a manually driven clock."""
    return FakeClock()


@pytest.fixture
def metadata_matrix() -> list[list[object]]:
    """Return the metadata matrix declaring the `orders` and `users` tables."""
    return [
        ["id", "sheet"],
        ["orders", "abc123"],
        ["users", "def456#A1:C100"],
    ]


@pytest.fixture
def source(metadata_matrix) -> FakeSheetsSource:
    """Return a fake remote source serving the metadata and both tables."""
    return FakeSheetsSource(
        {
            METADATA_SHEET_ID: metadata_matrix,
            "abc123": [["order_id", "amount"], ["1", "10.5"], ["2"]],
            "def456#A1:C100": [["user_id", "name", "email"], ["7", "ada", "ada@example.com"]],
        }
    )
