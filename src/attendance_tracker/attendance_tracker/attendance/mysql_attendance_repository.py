from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def is_attending(self, name: str, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id
                FROM attendance_records
                WHERE name=%s AND work_date=%s
                LIMIT 1
                """,
                (name, work_date),
            )
            return fetchone(cur) is not None

    def add(self, *, name: str, member: bool, attended_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(name, member, work_date, attended_at)
                VALUES(%s,%s,%s,%s)
                """,
                (name, bool(member), attended_at.date(), attended_at),
            )
            return int(cur.lastrowid)

    def remove(self, name: str, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE FROM attendance_records
                WHERE name=%s AND work_date=%s
                """,
                (name, work_date),
            )
            return cur.rowcount > 0

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, name, member, work_date, attended_at
                FROM attendance_records
                WHERE work_date=%s
                ORDER BY attended_at ASC, attendance_id ASC
                """,
                (work_date,),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    name=r["name"],
                    member=bool(r["member"]),
                    work_date=r["work_date"],
                    attended_at=r["attended_at"],
                )
                for r in rows
            ]
