from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

from .constants import CACHE_EXPIRY_SUFFIX, CACHE_FILE_NAME, DEFAULT_CACHE_TTL_HOURS, TOKEN_FILE_NAME
from .exceptions import ConfigurationError

_REQUIRED = (
    "JWT_TOKEN_PATH",
    "JWT_CREDENTIALS_KEY",
    "JWT_CREDENTIALS_EMAIL",
    "CACHE_FILE_PATH",
    "ROSTER_SHEET_ID",
    "ROSTER_RANGE_NAME",
)


def parse_ttl_hours(raw: Any) -> int:
    """Parse the cache lifetime in hours; anything unusable falls back to the default."""

    try:
        hours = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_CACHE_TTL_HOURS
    return hours if hours > 0 else DEFAULT_CACHE_TTL_HOURS


@dataclass(frozen=True)
class ServiceAccountKey:
    """Long-lived key material used for the JWT authorization exchange."""

    email: str
    private_key: str

    def as_info(self, token_uri: str) -> dict[str, str]:
        return {
            "type": "service_account",
            "client_email": self.email,
            "private_key": self.private_key,
            "token_uri": token_uri,
        }


@dataclass(frozen=True)
class RosterSettings:
    """Validated settings for the roster cache, built once at startup."""

    token_dir: Path
    cache_dir: Path
    service_account: ServiceAccountKey
    sheet_id: str
    range_name: str
    cache_ttl_hours: int = DEFAULT_CACHE_TTL_HOURS

    @property
    def token_file(self) -> Path:
        return self.token_dir / TOKEN_FILE_NAME

    @property
    def cache_file(self) -> Path:
        return self.cache_dir / CACHE_FILE_NAME

    @property
    def expiry_file(self) -> Path:
        return self.cache_dir / (CACHE_FILE_NAME + CACHE_EXPIRY_SUFFIX)

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(hours=self.cache_ttl_hours)

    @classmethod
    def from_settings(cls, settings: Any) -> "RosterSettings":
        """Build from a settings module (see ``config/``).

        Raises ConfigurationError naming every missing value, so a broken
        deployment is reported in one go rather than one variable at a time.
        """

        values = {name: getattr(settings, name, None) for name in _REQUIRED}
        missing = [name for name, value in values.items() if not value or not str(value).strip()]
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

        # Keys pasted into env files usually carry literal "\n" sequences.
        private_key = str(values["JWT_CREDENTIALS_KEY"]).replace("\\n", "\n")

        return cls(
            token_dir=Path(values["JWT_TOKEN_PATH"]),
            cache_dir=Path(values["CACHE_FILE_PATH"]),
            service_account=ServiceAccountKey(
                email=str(values["JWT_CREDENTIALS_EMAIL"]).strip(),
                private_key=private_key,
            ),
            sheet_id=str(values["ROSTER_SHEET_ID"]).strip(),
            range_name=str(values["ROSTER_RANGE_NAME"]).strip(),
            cache_ttl_hours=parse_ttl_hours(getattr(settings, "CACHE_EXPIRE_TIME", None)),
        )
