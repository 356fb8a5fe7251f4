from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceRecord
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.container import Container
from src.attendance_tracker.attendance_tracker.main import create_app
from src.attendance_tracker.attendance_tracker.roster.model import RosterResult, RosterSnapshot


class FakeRosterCache:
    def __init__(self, result: RosterResult | None = None, error: Exception | None = None):
        self.result = result or RosterResult.empty(served_from_cache=True)
        self.error = error
        self.cleared = 0

    def get_roster(self, *, now=None):
        if self.error is not None:
            raise self.error
        return self.result

    def clear_cache(self):
        self.cleared += 1


class DictAttendance:
    def __init__(self, *, broken: bool = False):
        self.rows: dict[tuple[str, date], AttendanceRecord] = {}
        self.broken = broken

    def _check(self):
        if self.broken:
            raise RuntimeError("database is down")

    def is_attending(self, name, work_date):
        self._check()
        return (name, work_date) in self.rows

    def add(self, *, name, member, attended_at):
        self._check()
        self.rows[(name, attended_at.date())] = AttendanceRecord(
            attendance_id=len(self.rows) + 1,
            name=name,
            member=member,
            work_date=attended_at.date(),
            attended_at=attended_at,
        )
        return len(self.rows)

    def remove(self, name, work_date):
        self._check()
        return self.rows.pop((name, work_date), None) is not None

    def list_for_date(self, work_date):
        self._check()
        return [r for r in self.rows.values() if r.work_date == work_date]


def _client(monkeypatch, *, roster=None, attendance=None):
    monkeypatch.setenv("APP_ENV", "testing")
    attendance = attendance or DictAttendance()
    container = Container(
        conn=None,
        attendance_repo=attendance,
        token_store=None,
        roster_source=None,
        cache_store=None,
        attendance_service=AttendanceService(attendance),
        roster_cache=roster or FakeRosterCache(),
    )
    app = create_app(container=container)
    return app.test_client()


def test_members_returns_roster(monkeypatch):
    roster = FakeRosterCache(RosterResult.cached(RosterSnapshot.of(["Alice", "Bob"])))
    client = _client(monkeypatch, roster=roster)

    body = client.get("/members").get_json()

    assert body == {"status": "success", "members": ["Alice", "Bob"], "cached": True}


def test_members_reports_refresh_as_not_cached(monkeypatch):
    roster = FakeRosterCache(RosterResult.refreshed(RosterSnapshot.of(["Carol"])))

    body = _client(monkeypatch, roster=roster).get("/members").get_json()

    assert body["cached"] is False
    assert body["members"] == ["Carol"]


def test_members_failure_is_reported(monkeypatch):
    client = _client(monkeypatch, roster=FakeRosterCache(error=RuntimeError("boom")))

    assert client.get("/members").get_json() == {"status": "failed"}


def test_clear_cache_always_succeeds(monkeypatch):
    roster = FakeRosterCache()
    client = _client(monkeypatch, roster=roster)

    assert client.get("/clear-cache").get_json() == {"status": "success"}
    assert roster.cleared == 1


def test_post_attendance_form(monkeypatch):
    attendance = DictAttendance()
    client = _client(monkeypatch, attendance=attendance)

    body = client.post("/attendance", data={"name": "Alice", "member": "true"}).get_json()

    assert body == {"status": "success"}
    (record,) = attendance.rows.values()
    assert record.name == "Alice"
    assert record.member is True


def test_post_attendance_json_twice(monkeypatch):
    client = _client(monkeypatch)

    client.post("/attendance", json={"name": "Bob", "member": False})
    body = client.post("/attendance", json={"name": "Bob", "member": False}).get_json()

    assert body == {"status": "failed", "reason": "Already marked as attending"}


@pytest.mark.parametrize("payload", [{"name": "Alice"}, {"member": "true"}, {}])
def test_post_attendance_requires_fields(monkeypatch, payload):
    client = _client(monkeypatch)

    assert client.post("/attendance", data=payload).get_json() == {"status": "failed"}


def test_post_attendance_database_error(monkeypatch):
    client = _client(monkeypatch, attendance=DictAttendance(broken=True))

    body = client.post("/attendance", data={"name": "Alice", "member": "true"}).get_json()

    assert body == {"status": "failed"}


def test_delete_attendance(monkeypatch):
    attendance = DictAttendance()
    client = _client(monkeypatch, attendance=attendance)
    client.post("/attendance", data={"name": "Alice", "member": "false"})

    assert client.delete("/attendance", data={"name": "Alice"}).get_json() == {"status": "success"}
    assert attendance.rows == {}
    assert client.delete("/attendance", data={}).get_json() == {"status": "failed"}


def test_get_attendance_for_date(monkeypatch):
    attendance = DictAttendance()
    attendance.add(name="Alice", member=True, attended_at=datetime(2025, 3, 7, 18, 5))
    client = _client(monkeypatch, attendance=attendance)

    body = client.get("/attendance?date=2025-3-7").get_json()

    assert body["status"] == "success"
    assert body["cached"] is False
    assert body["members"] == [{"name": "Alice", "member": True, "date": "2025-03-07", "time": "18:05:00"}]


def test_get_attendance_failure(monkeypatch):
    client = _client(monkeypatch, attendance=DictAttendance(broken=True))

    assert client.get("/attendance").get_json() == {"status": "failed"}


def test_attending_page_renders_even_on_failure(monkeypatch):
    client = _client(monkeypatch, attendance=DictAttendance(broken=True))

    resp = client.get("/attending?date=2025-03-07")

    assert resp.status_code == 200
    assert b"2025-03-07" in resp.data
    assert b"Nobody has been marked as attending." in resp.data


def test_index_page(monkeypatch):
    resp = _client(monkeypatch).get("/")

    assert resp.status_code == 200
    assert b"<title>Home</title>" in resp.data


def test_unknown_url_redirects_home(monkeypatch):
    resp = _client(monkeypatch).get("/no/such/page")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")
