from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from ..common.datetime_utils import as_utc, now_utc
from ..common.files import atomic_write_text
from ..core.constants import DEFAULT_CACHE_TTL_HOURS
from ..core.exceptions import CacheMissError
from .model import RosterSnapshot

log = logging.getLogger(__name__)


class CacheStore:
    """Owns the roster payload file and its expiry marker.

    The two files are written independently. A marker without a payload
    loads as a cache miss; a payload without a readable marker counts as
    expired.
    """

    def __init__(
        self,
        payload_path: Path,
        expiry_path: Path,
        *,
        ttl: timedelta = timedelta(hours=DEFAULT_CACHE_TTL_HOURS),
    ):
        self._payload_path = Path(payload_path)
        self._expiry_path = Path(expiry_path)
        self._ttl = ttl

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def load_expiry(self) -> Optional[datetime]:
        try:
            raw = self._expiry_path.read_text(encoding="utf-8").strip()
            return as_utc(datetime.fromisoformat(raw.replace("Z", "+00:00")))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            log.warning("Unreadable cache expiry marker %s: %s", self._expiry_path, e)
            return None

    def load(self) -> RosterSnapshot:
        try:
            raw = self._payload_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CacheMissError(f"Failed to load cache file {self._payload_path}: {e}") from e

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise CacheMissError(f"Cache file {self._payload_path} is not valid JSON") from e

        if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
            raise CacheMissError(f"Cache file {self._payload_path} does not hold a list of names")
        return RosterSnapshot.of(data)

    def save(self, snapshot: RosterSnapshot, *, now: Optional[datetime] = None) -> Optional[datetime]:
        """Persist ``snapshot`` and, only if that worked, a new expiry.

        Returns the expiry written, or None if the cache is left expired.
        """

        try:
            self._payload_path.parent.mkdir(parents=True, exist_ok=True)
            atomic_write_text(self._payload_path, json.dumps(list(snapshot.entries)))
        except OSError as e:
            log.error("Failed to save cache file %s: %s", self._payload_path, e)
            return None

        expires_at = as_utc(now or now_utc()) + self._ttl
        try:
            self._expiry_path.parent.mkdir(parents=True, exist_ok=True)
            atomic_write_text(self._expiry_path, expires_at.isoformat())
        except OSError as e:
            # Payload stays; with no marker the next read refreshes.
            log.error("Failed to save cache expiry %s: %s", self._expiry_path, e)
            return None

        log.debug("Saved %d roster entries, expires at %s", len(snapshot), expires_at.isoformat())
        return expires_at

    def clear(self) -> bool:
        """Delete payload and marker independently. True if both are gone."""

        cleared = True
        for path in (self._payload_path, self._expiry_path):
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                log.error("Failed to delete cache artifact %s: %s", path, e)
                cleared = False
        return cleared
