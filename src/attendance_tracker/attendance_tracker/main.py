from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_setup import setup_logging
from .container import Container, build_container
from .core.exceptions import ConfigurationError
from .core.settings import RosterSettings
from .database.bootstrap import apply_schema, list_tables
from .attendance.controller import register as register_attendance
from .home.controller import register as register_home
from .roster.controller import register as register_roster

log = logging.getLogger(__name__)


def create_app(*, container: Container | None = None) -> Flask:
    """Application factory.

    Raises ConfigurationError when required settings are missing; only
    ``run()`` turns that into a process exit.
    """

    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["HOST"] = getattr(settings, "HOST", "0.0.0.0")
    app.config["PORT"] = int(getattr(settings, "PORT", 5000))

    if container is None:
        roster_settings = RosterSettings.from_settings(settings)
        db_config = getattr(settings, "DB_CONFIG")
        log.info(
            "settings=%s db=%s@%s:%s/%s cache=%s ttl=%sh",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
            roster_settings.cache_dir,
            roster_settings.cache_ttl_hours,
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            log.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config, roster_settings=roster_settings)

    register_home(app, container)
    register_roster(app, container)
    register_attendance(app, container)

    return app


def run() -> None:
    try:
        app = create_app()
    except ConfigurationError as e:
        log.error("%s", e)
        sys.exit(1)

    app.run(
        host=app.config.get("HOST", "0.0.0.0"),
        port=int(app.config.get("PORT", 5000)),
        debug=app.config["DEBUG"],
    )


if __name__ == "__main__":
    run()
