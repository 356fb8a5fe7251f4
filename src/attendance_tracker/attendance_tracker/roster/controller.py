from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..core.enums import ResponseStatus
from ..container import Container

log = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/members", methods=["GET"], endpoint="members")
    def members():
        try:
            result = container.roster_cache.get_roster()
        except Exception:
            log.exception("Unexpected failure while reading the roster")
            return jsonify({"status": ResponseStatus.FAILED.value})

        payload = result.as_dict()
        return jsonify(
            {
                "status": ResponseStatus.SUCCESS.value,
                "members": payload["entries"],
                "cached": payload["served_from_cache"],
            }
        )

    @app.route("/clear-cache", methods=["GET"], endpoint="clear_cache")
    def clear_cache():
        container.roster_cache.clear_cache()
        # Reported as success no matter what; clearing is fire-and-forget.
        return jsonify({"status": ResponseStatus.SUCCESS.value})
