from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template, request

from ..common.datetime_utils import parse_query_date
from ..core.constants import HTML_DATE_FORMAT
from ..core.enums import ResponseStatus
from ..core.exceptions import ValidationError
from ..container import Container

log = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _body() -> dict:
        if request.is_json:
            return request.get_json(silent=True) or {}
        return request.form.to_dict()

    def _failed(reason: str | None = None):
        payload = {"status": ResponseStatus.FAILED.value}
        if reason:
            payload["reason"] = reason
        return jsonify(payload)

    def _success():
        return jsonify({"status": ResponseStatus.SUCCESS.value})

    @app.route("/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        work_date = parse_query_date(request.args.get("date"))
        try:
            data = container.attendance_service.attending_on(work_date)
        except Exception:
            log.exception("Failed to load attendance for %s", work_date)
            return _failed()
        return jsonify({"status": ResponseStatus.SUCCESS.value, "members": data, "cached": False})

    @app.route("/attending", methods=["GET"], endpoint="attending")
    def attending():
        work_date = parse_query_date(request.args.get("date"))
        try:
            data = container.attendance_service.attending_on(work_date)
        except Exception:
            # Still render the page, just with nothing on it.
            log.exception("Failed to load attendance for %s", work_date)
            data = []
        return render_template(
            "attending.html",
            title="Attendance",
            data=data,
            date=work_date.strftime(HTML_DATE_FORMAT),
        )

    @app.route("/attendance", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark():
        body = _body()
        if "name" not in body or "member" not in body:
            return _failed()

        try:
            container.attendance_service.mark(str(body["name"]), body["member"])
        except ValidationError as e:
            return _failed(str(e))
        except Exception:
            log.exception("Failed to mark attendance")
            return _failed()
        return _success()

    @app.route("/attendance", methods=["DELETE"], endpoint="attendance_unmark")
    def attendance_unmark():
        body = _body()
        if "name" not in body:
            return _failed()

        try:
            container.attendance_service.unmark(str(body["name"]))
        except ValidationError as e:
            return _failed(str(e))
        except Exception:
            log.exception("Failed to remove attendance")
            return _failed()
        return _success()
