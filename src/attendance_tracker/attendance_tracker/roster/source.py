from __future__ import annotations

from typing import Any, Iterable, List, Protocol, Sequence


class RosterSource(Protocol):
    def fetch(self, credential: Any, source_id: str, range_selector: str) -> List[str]:
        """Return roster names; remote faults come back as an empty list."""

        raise NotImplementedError


def first_column(rows: Iterable[Sequence[Any]]) -> List[str]:
    """Reduce sheet rows to their first cell.

    Rows whose first cell is None or blank after stripping are skipped.
    """

    names: List[str] = []
    for row in rows or []:
        if not row:
            continue
        value = row[0]
        if value is None or not str(value).strip():
            continue
        names.append(str(value))
    return names
