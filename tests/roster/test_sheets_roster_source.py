from __future__ import annotations

import pytest
from gspread.exceptions import GSpreadException
from requests import exceptions as requests_exceptions

from src.attendance_tracker.attendance_tracker.core.exceptions import TransportError
from src.attendance_tracker.attendance_tracker.roster.sheets_roster_source import SheetsRosterSource
from src.attendance_tracker.attendance_tracker.roster.source import first_column


class FakeHTTPClient:
    def __init__(self, response=None, error: Exception | None = None):
        self._response = response
        self._error = error
        self.calls: list[tuple[str, str]] = []

    def values_get(self, spreadsheet_id, range_name):
        self.calls.append((spreadsheet_id, range_name))
        if self._error is not None:
            raise self._error
        return self._response


class FakeClient:
    def __init__(self, http_client: FakeHTTPClient):
        self.http_client = http_client


def _source(http_client: FakeHTTPClient, seen_credentials: list | None = None) -> SheetsRosterSource:
    def factory(credential):
        if seen_credentials is not None:
            seen_credentials.append(credential)
        return FakeClient(http_client)

    return SheetsRosterSource(client_factory=factory)


def test_fetch_reduces_rows_to_first_column():
    http = FakeHTTPClient({"range": "Members!A2:B", "values": [["Alice", "x"], ["Bob"], ["Alice"]]})
    seen: list = []

    names = _source(http, seen).fetch("creds", "sheet-1", "Members!A2:B")

    assert names == ["Alice", "Bob", "Alice"]
    assert http.calls == [("sheet-1", "Members!A2:B")]
    assert seen == ["creds"]


def test_rows_without_a_first_value_are_skipped():
    assert first_column([["Alice"], [], [""], ["  "], [None, "y"], ["Bob"]]) == ["Alice", "Bob"]


def test_first_cell_is_kept_verbatim():
    assert first_column([[" Alice "], ["Bob\t", "x"]]) == [" Alice ", "Bob\t"]


def test_empty_range_returns_empty_list():
    http = FakeHTTPClient({"range": "Members!A2:A", "majorDimension": "ROWS"})

    assert _source(http).fetch("creds", "sheet-1", "Members!A2:A") == []


@pytest.mark.parametrize(
    "error",
    [GSpreadException("quota exceeded"), requests_exceptions.ConnectionError("unreachable")],
)
def test_remote_errors_become_empty_list(error):
    http = FakeHTTPClient(error=error)

    assert _source(http).fetch("creds", "sheet-1", "Members!A2:A") == []


def test_read_rows_keeps_the_error_typed():
    http = FakeHTTPClient(error=GSpreadException("boom"))

    with pytest.raises(TransportError):
        _source(http).read_rows("creds", "sheet-1", "Members!A2:A")
