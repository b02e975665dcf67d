from __future__ import annotations

from flask import Flask, current_app, request

from ..container import Container
from ..core.enums import TimeWindow
from ..core.exceptions import ValidationError
from ..records.controller import json_errors, ok, request_now


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @json_errors
    def dashboard():
        window = TimeWindow.parse(request.args.get("window") or current_app.config["DEFAULT_WINDOW"])

        limit = None
        raw_limit = request.args.get("limit", "").strip()
        if raw_limit:
            if not raw_limit.isdigit():
                raise ValidationError("limit must be a non-negative integer")
            limit = int(raw_limit)

        report = container.dashboard_service.build(window, now=request_now(), limit=limit)
        return ok(report.to_dict())
