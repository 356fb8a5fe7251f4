"""Drop the cached roster (and optionally the stored JWT token).

Usage: python scripts/clear_roster_cache.py [--token]
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.core.exceptions import ConfigurationError
from src.attendance_tracker.attendance_tracker.core.settings import RosterSettings
from src.attendance_tracker.attendance_tracker.roster.cache_store import CacheStore
from src.attendance_tracker.attendance_tracker.roster.token_store import TokenStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--token", action="store_true", help="also delete the stored JWT token")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    try:
        roster_settings = RosterSettings.from_settings(settings)
    except ConfigurationError as e:
        print(f"ERROR {e}", file=sys.stderr)
        return 1

    cache = CacheStore(roster_settings.cache_file, roster_settings.expiry_file, ttl=roster_settings.cache_ttl)
    cleared = cache.clear()
    print(f"cache: {'cleared' if cleared else 'partially cleared'} ({roster_settings.cache_dir})")

    if args.token:
        TokenStore(roster_settings.token_file, roster_settings.service_account).clear()
        print(f"token: removed ({roster_settings.token_file})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
