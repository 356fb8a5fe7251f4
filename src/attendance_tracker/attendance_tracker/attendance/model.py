from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one person marked present on one day."""

    attendance_id: int
    name: str
    member: bool
    work_date: date
    attended_at: datetime

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "member": self.member,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "time": self.attended_at.strftime("%H:%M:%S"),
        }
