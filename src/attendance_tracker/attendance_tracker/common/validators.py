from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def parse_bool_flag(value: Any) -> bool:
    """Form posts send "true"/"false" strings, JSON bodies send real booleans."""

    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"
