"""Tests for the gsheets_catalog.scripting.sheets_exception module."""

from unittest.mock import patch

import pytest

from gsheets_catalog.errors import TableLoadError, UnknownTableError
from gsheets_catalog.scripting import sheets_exception


class TestInterceptor:
    """Tests for Interceptor."""

    def test_no_exception(self) -> None:
        interceptor = sheets_exception.Interceptor()

        with patch("gsheets_catalog.scripting.sheets_exception.log") as log:
            with interceptor.table("orders"):
                pass

        assert interceptor.failed is False
        assert interceptor.exitcode() == 0
        log.error.assert_not_called()

    def test_library_error_is_recorded_and_logged(self) -> None:
        interceptor = sheets_exception.Interceptor()
        error = UnknownTableError("nope")

        with patch("gsheets_catalog.scripting.sheets_exception.log") as log:
            with interceptor.table("nope"):
                raise error

        assert interceptor.failed is True
        assert interceptor.exitcode() == 1
        assert interceptor.failures == {"nope": error}
        log.error.assert_called_once()
        assert log.error.call_args[0][0] == "processing %s... failure: %s"
        assert log.error.call_args[0][1] == "nope"

    def test_keeps_failing_after_success(self) -> None:
        interceptor = sheets_exception.Interceptor()
        with interceptor.table("orders"):
            raise TableLoadError("orders", "abc123", "503")
        with interceptor.table("users"):
            pass
        assert interceptor.exitcode() == 1
        assert list(interceptor.failures) == ["orders"]

    def test_other_errors_propagate(self) -> None:
        interceptor = sheets_exception.Interceptor()
        with pytest.raises(ZeroDivisionError):
            with interceptor.table("orders"):
                _ = 1 / 0
        assert interceptor.failed is False

    def test_keyboard_interrupt_is_not_suppressed(self) -> None:
        interceptor = sheets_exception.Interceptor()
        with pytest.raises(KeyboardInterrupt):
            with interceptor.table("orders"):
                raise KeyboardInterrupt
        assert interceptor.failed is False
