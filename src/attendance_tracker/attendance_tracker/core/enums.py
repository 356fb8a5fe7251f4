from __future__ import annotations

from enum import Enum


class RosterOutcome(str, Enum):
    """Which fallback layer produced a roster response."""

    CACHED = "CACHED"
    REFRESHED = "REFRESHED"
    STALE_FALLBACK = "STALE_FALLBACK"
    EMPTY = "EMPTY"


class ResponseStatus(str, Enum):
    """Status field used by every JSON response of the route layer."""

    SUCCESS = "success"
    FAILED = "failed"
