from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def is_attending(self, name: str, work_date: date) -> bool:
        raise NotImplementedError

    def add(self, *, name: str, member: bool, attended_at: datetime) -> int:
        raise NotImplementedError

    def remove(self, name: str, work_date: date) -> bool:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
