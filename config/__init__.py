"""Settings modules selected by APP_ENV (development, testing, production)."""

from .config import get_settings_module

__all__ = ["get_settings_module"]
