from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.settings import RosterSettings
from .database.connection import DBConfig, DatabaseConnection
from .roster.cache_store import CacheStore
from .roster.service import RosterCache
from .roster.sheets_roster_source import SheetsRosterSource
from .roster.source import RosterSource
from .roster.token_store import TokenStore


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None

    attendance_repo: AttendanceRepository
    token_store: TokenStore
    roster_source: RosterSource
    cache_store: CacheStore

    attendance_service: AttendanceService
    roster_cache: RosterCache


def build_container(*, db_config: dict, roster_settings: RosterSettings) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    attendance_repo = MySQLAttendanceRepository(conn)
    token_store = TokenStore(roster_settings.token_file, roster_settings.service_account)
    roster_source = SheetsRosterSource()
    cache_store = CacheStore(
        roster_settings.cache_file,
        roster_settings.expiry_file,
        ttl=roster_settings.cache_ttl,
    )

    attendance_service = AttendanceService(attendance_repo)
    roster_cache = RosterCache(
        token_store,
        roster_source,
        cache_store,
        sheet_id=roster_settings.sheet_id,
        range_name=roster_settings.range_name,
    )

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        token_store=token_store,
        roster_source=roster_source,
        cache_store=cache_store,
        attendance_service=attendance_service,
        roster_cache=roster_cache,
    )
