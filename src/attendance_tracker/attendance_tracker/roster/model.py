from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..core.enums import RosterOutcome


@dataclass(frozen=True)
class RosterSnapshot:
    """Roster names in sheet row order. Replaced wholesale, never patched."""

    entries: tuple[str, ...] = ()

    @classmethod
    def of(cls, names: Iterable[str]) -> "RosterSnapshot":
        return cls(entries=tuple(names))

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)


@dataclass(frozen=True)
class RosterResult:
    """Read-model returned to the route layer.

    ``outcome`` says which fallback layer answered; ``served_from_cache`` is
    the only degradation signal the HTTP response exposes.
    """

    entries: tuple[str, ...]
    served_from_cache: bool
    outcome: RosterOutcome = field(default=RosterOutcome.EMPTY)

    @classmethod
    def cached(cls, snapshot: RosterSnapshot) -> "RosterResult":
        return cls(entries=snapshot.entries, served_from_cache=True, outcome=RosterOutcome.CACHED)

    @classmethod
    def refreshed(cls, snapshot: RosterSnapshot) -> "RosterResult":
        return cls(entries=snapshot.entries, served_from_cache=False, outcome=RosterOutcome.REFRESHED)

    @classmethod
    def stale_fallback(cls, snapshot: RosterSnapshot) -> "RosterResult":
        return cls(entries=snapshot.entries, served_from_cache=True, outcome=RosterOutcome.STALE_FALLBACK)

    @classmethod
    def empty(cls, *, served_from_cache: bool) -> "RosterResult":
        return cls(entries=(), served_from_cache=served_from_cache, outcome=RosterOutcome.EMPTY)

    def as_dict(self) -> dict:
        return {"entries": list(self.entries), "served_from_cache": self.served_from_cache}
