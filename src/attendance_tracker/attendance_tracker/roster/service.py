from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import as_utc, now_utc
from ..core.exceptions import AuthError, CacheMissError
from .cache_store import CacheStore
from .model import RosterResult, RosterSnapshot
from .source import RosterSource
from .token_store import TokenStore

log = logging.getLogger(__name__)


class RosterCache:
    """Serves the roster from disk while it is fresh, refreshes it once expired.

    Nothing here raises to the caller: each failure falls back one layer
    (fresh data, stale data, empty list). The next request is the retry.
    Concurrent refreshes are not coalesced; the last save wins.
    """

    def __init__(
        self,
        tokens: TokenStore,
        source: RosterSource,
        cache: CacheStore,
        *,
        sheet_id: str,
        range_name: str,
    ):
        self._tokens = tokens
        self._source = source
        self._cache = cache
        self._sheet_id = sheet_id
        self._range_name = range_name

    def get_roster(self, *, now: Optional[datetime] = None) -> RosterResult:
        now = as_utc(now or now_utc())

        expires_at = self._cache.load_expiry()
        if expires_at is not None and now < expires_at:
            result = self._from_cache(fallback=False)
        else:
            result = self._refresh(expires_at, now=now)

        log.debug("Roster answered by %s layer (%d entries)", result.outcome.value, len(result.entries))
        return result

    def clear_cache(self) -> None:
        try:
            if not self._cache.clear():
                log.warning("Roster cache was only partially cleared")
        except OSError as e:
            log.error("Failed to clear roster cache: %s", e)

    def _refresh(self, expires_at: Optional[datetime], *, now: datetime) -> RosterResult:
        try:
            credential = self._tokens.authorize()
        except AuthError as e:
            log.warning("Failed to authorize with JWT (%s), defaulting to old cache from %s", e, expires_at)
            return self._from_cache(fallback=True)

        names = self._source.fetch(credential, self._sheet_id, self._range_name)
        if not names:
            # Keep the existing cache; an empty read is often a transient fault.
            log.warning("Roster fetch returned no entries; cache left untouched")
            return RosterResult.empty(served_from_cache=False)

        snapshot = RosterSnapshot.of(names)
        self._cache.save(snapshot, now=now)
        log.info("Roster refreshed from sheet (%d entries)", len(snapshot))
        return RosterResult.refreshed(snapshot)

    def _from_cache(self, *, fallback: bool) -> RosterResult:
        try:
            snapshot = self._cache.load()
        except CacheMissError as e:
            log.warning("Failed to load cache, defaulting to empty: %s", e)
            return RosterResult.empty(served_from_cache=True)

        if fallback:
            return RosterResult.stale_fallback(snapshot)
        return RosterResult.cached(snapshot)
