"""Module implementing the authenticated Google Sheets client."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final, Protocol, runtime_checkable

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient import errors as api_errors
from googleapiclient.discovery import build

from ..errors import BadCredentialsError, RemoteFetchError
from .location import SheetLocation

_TRANSPORT_ERRORS = (
    OSError,
    ValueError,
    GoogleAuthError,
    api_errors.Error,
    httplib2.HttpLib2Error,
)
"""Errors raised by credential loading and by the httplib2 transport."""

log = logging.getLogger("remote/client")

SHEETS_READONLY_SCOPE: Final[str] = "https://www.googleapis.com/auth/spreadsheets.readonly"

RowMatrix = list[list[Any]]
"""Rows of heterogeneous cell values, possibly of different lengths."""


@runtime_checkable
class SheetsRemoteSource(Protocol):
    """
    Source of raw value matrices addressed by location expression.

    Methods:
        fetch: return the matrix for the given location expression
            or raise RemoteFetchError.
    """

    def fetch(self, expr: str) -> RowMatrix: ...


class SheetsClient:
    """
    Client reading value ranges using the Sheets v4 API.

    This class implements the SheetsRemoteSource protocol. It does not
    retry failed requests: the caller decides whether to try again.
    """

    def __init__(self, service: Any):
        """
        Initialize the client.

        Parameters:
            service: a Sheets v4 service resource as returned by
                `googleapiclient.discovery.build("sheets", "v4", ...)`.
        """
        self._service = service

    @classmethod
    def from_credentials_file(cls, credentials_file_path: str | Path) -> SheetsClient:
        """
        Create a client authenticated with a service account key file.

        Raises:
            BadCredentialsError: if the file is missing or invalid, or
                if we cannot initialize the API transport.
        """
        path = str(credentials_file_path)
        try:
            credentials = service_account.Credentials.from_service_account_file(
                path,
                scopes=[SHEETS_READONLY_SCOPE],
            )
            service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        except _TRANSPORT_ERRORS as exc:
            raise BadCredentialsError(path, exc) from exc
        return cls(service)

    def fetch(self, expr: str) -> RowMatrix:
        """
        Read all the values in the range selected by the given expression.

        Returns:
            The values matrix. The API omits trailing empty rows and
            cells, so rows may have different lengths and an empty
            range yields an empty list.

        Raises:
            RemoteFetchError: on invalid expressions and network, auth
                or response parsing failures.
        """
        try:
            location = SheetLocation.parse(expr)
            log.info("accessing sheet id [%s] with range [%s]", location.sheet_id, location.range)
            response = (
                self._service.spreadsheets()
                .values()
                .get(spreadsheetId=location.sheet_id, range=location.range)
                .execute()
            )
        except _TRANSPORT_ERRORS as exc:
            raise RemoteFetchError(expr, exc) from exc
        if not isinstance(response, dict):
            raise RemoteFetchError(expr, f"unexpected response type {type(response).__name__}")
        values = response.get("values", [])
        if not isinstance(values, list) or not all(isinstance(row, list) for row in values):
            raise RemoteFetchError(expr, "malformed values matrix")
        return values
