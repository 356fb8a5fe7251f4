from __future__ import annotations

import logging
from typing import Any, Callable, List, Sequence

import gspread
from google.auth.exceptions import GoogleAuthError
from gspread.exceptions import GSpreadException
from requests import exceptions as requests_exceptions

from ..core.exceptions import TransportError
from .source import RosterSource, first_column

log = logging.getLogger(__name__)


class SheetsRosterSource(RosterSource):
    """Reads the roster column from a Google Sheet with a single ``values.get``."""

    def __init__(self, client_factory: Callable[[Any], gspread.Client] = gspread.authorize):
        self._client_factory = client_factory

    def read_rows(self, credential: Any, source_id: str, range_selector: str) -> Sequence[Sequence[Any]]:
        try:
            client = self._client_factory(credential)
            response = client.http_client.values_get(source_id, range_selector)
        except (GSpreadException, GoogleAuthError, requests_exceptions.RequestException) as e:
            raise TransportError(f'Failed to retrieve google sheet ID "{source_id}" RANGE "{range_selector}": {e}') from e
        # An empty range comes back without a "values" key.
        return (response or {}).get("values") or []

    def fetch(self, credential: Any, source_id: str, range_selector: str) -> List[str]:
        try:
            rows = self.read_rows(credential, source_id, range_selector)
        except TransportError as e:
            log.error("%s", e)
            return []
        return first_column(rows)
