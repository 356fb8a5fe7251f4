from __future__ import annotations

import json
from datetime import datetime

import pytest
from google.auth.exceptions import RefreshError

from src.attendance_tracker.attendance_tracker.core.exceptions import AuthError
from src.attendance_tracker.attendance_tracker.core.settings import ServiceAccountKey
from src.attendance_tracker.attendance_tracker.roster.token_store import TokenStore

KEY = ServiceAccountKey(email="roster@test.iam.gserviceaccount.com", private_key="unused")


class FakeCredentials:
    def __init__(self, *, fail: Exception | None = None):
        self.token = None
        self.expiry = None
        self.refresh_calls = 0
        self._fail = fail

    def refresh(self, request):
        self.refresh_calls += 1
        if self._fail is not None:
            raise self._fail
        self.token = "fresh-token"
        self.expiry = datetime(2026, 2, 1, 13, 0)


class CredentialsFactory:
    def __init__(self, **kwargs):
        self._kwargs = kwargs
        self.built: list[FakeCredentials] = []

    def __call__(self) -> FakeCredentials:
        creds = FakeCredentials(**self._kwargs)
        self.built.append(creds)
        return creds


def _store(token_path, factory) -> TokenStore:
    return TokenStore(token_path, KEY, credentials_factory=factory, request_factory=object)


def test_exchange_when_no_token_file_and_persist(tmp_path):
    token_path = tmp_path / "jwt" / "token.json"
    factory = CredentialsFactory()

    creds = _store(token_path, factory).authorize()

    assert creds.token == "fresh-token"
    assert creds.refresh_calls == 1
    saved = json.loads(token_path.read_text())
    assert saved["access_token"] == "fresh-token"
    assert saved["expiry"] == "2026-02-01T13:00:00"


def test_stored_token_is_reused_without_exchange(tmp_path):
    token_path = tmp_path / "token.json"
    token_path.write_text(json.dumps({"access_token": "stored", "expiry": "2026-02-01T13:00:00+00:00"}))
    factory = CredentialsFactory()

    creds = _store(token_path, factory).authorize()

    assert creds.refresh_calls == 0
    assert creds.token == "stored"
    assert creds.expiry == datetime(2026, 2, 1, 13, 0)


def test_each_call_builds_a_new_client(tmp_path):
    token_path = tmp_path / "token.json"
    factory = CredentialsFactory()
    store = _store(token_path, factory)

    first = store.authorize()
    second = store.authorize()

    assert first is not second
    assert len(factory.built) == 2
    # Only the first call had to exchange.
    assert second.refresh_calls == 0


@pytest.mark.parametrize("content", ["{broken", json.dumps({"token_type": "Bearer"}), json.dumps(["x"])])
def test_unreadable_token_triggers_exchange(tmp_path, content):
    token_path = tmp_path / "token.json"
    token_path.write_text(content)

    creds = _store(token_path, CredentialsFactory()).authorize()

    assert creds.refresh_calls == 1
    assert json.loads(token_path.read_text())["access_token"] == "fresh-token"


def test_exchange_failure_raises_auth_error(tmp_path):
    token_path = tmp_path / "token.json"
    store = _store(token_path, CredentialsFactory(fail=RefreshError("invalid_grant")))

    with pytest.raises(AuthError):
        store.authorize()
    assert not token_path.exists()


def test_bad_key_material_raises_auth_error(tmp_path):
    def broken_factory():
        raise ValueError("Could not deserialize key data")

    with pytest.raises(AuthError):
        _store(tmp_path / "token.json", broken_factory).authorize()


def test_token_write_failure_is_not_fatal(tmp_path):
    # A directory where the token file should be: reading and writing both fail.
    token_path = tmp_path / "token.json"
    token_path.mkdir()

    creds = _store(token_path, CredentialsFactory()).authorize()

    assert creds.token == "fresh-token"


def test_clear_removes_token(tmp_path):
    token_path = tmp_path / "token.json"
    token_path.write_text(json.dumps({"access_token": "stored"}))
    store = _store(token_path, CredentialsFactory())

    store.clear()
    store.clear()

    assert not token_path.exists()


def test_bad_key_material_fails_even_with_stored_token(tmp_path):
    token_path = tmp_path / "token.json"
    token_path.write_text(json.dumps({"access_token": "stored", "expiry": "2026-02-01T13:00:00"}))

    def broken_factory():
        raise ValueError("Could not deserialize key data")

    with pytest.raises(AuthError):
        _store(token_path, broken_factory).authorize()
    assert json.loads(token_path.read_text())["access_token"] == "stored"
