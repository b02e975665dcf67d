from __future__ import annotations

from flask import Flask, current_app, request

from ..container import Container
from ..core.enums import TimeWindow
from ..records.controller import json_errors, ok, request_now


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/window", methods=["GET"], endpoint="attendance_window")
    @json_errors
    def attendance_window():
        window = TimeWindow.parse(request.args.get("window") or current_app.config["DEFAULT_WINDOW"])
        view = container.attendance_service.list_in_window(window, now=request_now())
        return ok(view.to_dict())
