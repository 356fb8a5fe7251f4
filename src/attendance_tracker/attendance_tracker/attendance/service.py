from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import now_local
from ..common.validators import parse_bool_flag, require_non_empty
from ..core.exceptions import ValidationError
from .repository import AttendanceRepository

log = logging.getLogger(__name__)

ALREADY_ATTENDING = "Already marked as attending"


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def mark(self, name: str, member: Any, *, now: Optional[datetime] = None) -> int:
        now = now or now_local()
        name = require_non_empty(name, "Name")

        if self._attendance.is_attending(name, now.date()):
            raise ValidationError(ALREADY_ATTENDING)

        attendance_id = self._attendance.add(name=name, member=parse_bool_flag(member), attended_at=now)
        log.info("Marked %r as attending on %s", name, now.date().isoformat())
        return attendance_id

    def unmark(self, name: str, *, today: Optional[date] = None) -> bool:
        name = require_non_empty(name, "Name")
        return self._attendance.remove(name, today or now_local().date())

    def attending_on(self, work_date: date) -> list[dict]:
        return [r.to_dict() for r in self._attendance.list_for_date(work_date)]
