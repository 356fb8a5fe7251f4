from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Optional

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.service_account import Credentials

from ..common.files import atomic_write_text
from ..core.constants import GOOGLE_TOKEN_URI, SHEETS_SCOPES
from ..core.exceptions import AuthError
from ..core.settings import ServiceAccountKey

log = logging.getLogger(__name__)

CredentialsFactory = Callable[[], Credentials]


class TokenStore:
    """Persists the service-account access token next to the app.

    Every ``authorize()`` builds a new credentials object; only the token
    itself is reused. Refreshing an expired token is left to google-auth,
    which does it before the next request it signs.

    Key material is parsed on every call, even when a stored token is
    reused: the signer is what lets google-auth renew that token. Malformed
    key material therefore raises AuthError whether or not token.json holds
    a usable token.
    """

    def __init__(
        self,
        token_path: Path,
        key: ServiceAccountKey,
        *,
        credentials_factory: Optional[CredentialsFactory] = None,
        request_factory: Callable[[], Any] = Request,
    ):
        self._token_path = Path(token_path)
        self._key = key
        self._credentials_factory = credentials_factory or self._build_credentials
        self._request_factory = request_factory

    def _build_credentials(self) -> Credentials:
        return Credentials.from_service_account_info(
            self._key.as_info(GOOGLE_TOKEN_URI),
            scopes=list(SHEETS_SCOPES),
        )

    def authorize(self) -> Credentials:
        try:
            credentials = self._credentials_factory()
        except (ValueError, GoogleAuthError) as e:
            raise AuthError(f"Invalid service account key material: {e}") from e

        try:
            self._token_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            log.warning("Could not create token directory %s: %s", self._token_path.parent, e)

        stored = self._load_token()
        if stored is not None:
            credentials.token = stored["access_token"]
            credentials.expiry = stored["expiry"]
            return credentials

        log.debug("Authorizing with JWT")
        try:
            credentials.refresh(self._request_factory())
        except (GoogleAuthError, ValueError) as e:
            log.error("Failed to authorize with JWT: %s", e)
            raise AuthError(f"JWT authorization failed: {e}") from e

        self._save_token(credentials)
        return credentials

    def clear(self) -> None:
        try:
            self._token_path.unlink()
        except FileNotFoundError:
            pass

    def _load_token(self) -> Optional[dict]:
        try:
            data = json.loads(self._token_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable token file %s: %s", self._token_path, e)
            return None

        if not isinstance(data, dict) or not data.get("access_token"):
            log.warning("Ignoring token file %s without an access token", self._token_path)
            return None

        return {"access_token": str(data["access_token"]), "expiry": _parse_expiry(data.get("expiry"))}

    def _save_token(self, credentials: Credentials) -> None:
        expiry = getattr(credentials, "expiry", None)
        payload = {
            "access_token": credentials.token,
            "token_type": "Bearer",
            "expiry": expiry.isoformat() if expiry else None,
        }
        try:
            atomic_write_text(self._token_path, json.dumps(payload))
        except OSError as e:
            log.error('Failed to write JWT token to "%s": %s', self._token_path, e)


def _parse_expiry(raw: Any) -> Optional[datetime]:
    # google-auth compares expiry against a naive UTC clock.
    if not raw:
        return None
    try:
        value = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    except ValueError:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
