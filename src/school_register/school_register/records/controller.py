from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..common.datetime_utils import parse_iso_date, today_local
from ..core.enums import RecordKind, SessionMode
from ..core.exceptions import IdentityCollisionError, NotFoundError, SessionClosedError, ValidationError
from .policy import UpdateMode, policy_for
from .forms import clean_payload

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "y"}


def ok(data=None, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def request_now():
    """Return the client-supplied `?now=YYYY-MM-DD`, else the local date."""
    value = request.args.get("now", "").strip()
    return parse_iso_date(value) if value else today_local()


def json_errors(view):
    """Map domain errors raised by a view onto JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return fail(str(e), 404)
        except ValidationError as e:
            return fail(str(e), 400)
        except SessionClosedError as e:
            return fail(str(e), 409)
        except IdentityCollisionError:
            logger.exception("identity collision")
            return fail("Internal error: duplicate record id", 500)

    return wrapper


def register(app: Flask, container: Container) -> None:
    def session_state(kind: RecordKind) -> dict:
        session = container.session(kind)
        values = {k: getattr(v, "value", v) for k, v in session.form_values.items()}
        return {"mode": session.mode.value, "selected_id": session.selected_id, "form_values": values}

    @app.route("/api/<kind>", methods=["GET"], endpoint="records_list")
    @json_errors
    def records_list(kind: str):
        rk = RecordKind.parse(kind)
        return ok([r.to_dict() for r in container.records.list(rk)])

    @app.route("/api/<kind>/<record_id>", methods=["GET"], endpoint="records_get")
    @json_errors
    def records_get(kind: str, record_id: str):
        rk = RecordKind.parse(kind)
        return ok(container.records.get(rk, record_id).to_dict())

    @app.route("/api/<kind>", methods=["POST"], endpoint="records_create")
    @json_errors
    def records_create(kind: str):
        rk = RecordKind.parse(kind)
        payload = clean_payload(rk, request.get_json(silent=True))
        record = container.records.create(rk, payload)
        return ok(record.to_dict(), 201)

    @app.route("/api/<kind>/<record_id>", methods=["PUT"], endpoint="records_update")
    @json_errors
    def records_update(kind: str, record_id: str):
        rk = RecordKind.parse(kind)
        partial = policy_for(rk).update is UpdateMode.MERGE
        payload = clean_payload(rk, request.get_json(silent=True), partial=partial)
        record = container.records.update(rk, record_id, payload)
        return ok(record.to_dict())

    @app.route("/api/<kind>/<record_id>", methods=["DELETE"], endpoint="records_delete")
    @json_errors
    def records_delete(kind: str, record_id: str):
        rk = RecordKind.parse(kind)
        # the user has to confirm before anything is removed
        if request.args.get("confirm", "").strip().lower() not in _TRUTHY:
            return fail("Deletion must be confirmed (confirm=true)", 400)
        record = container.records.delete(rk, record_id)
        return ok(record.to_dict())

    @app.route("/api/<kind>/session", methods=["GET"], endpoint="session_state")
    @json_errors
    def session_get(kind: str):
        return ok(session_state(RecordKind.parse(kind)))

    @app.route("/api/<kind>/session", methods=["POST"], endpoint="session_new")
    @json_errors
    def session_new(kind: str):
        rk = RecordKind.parse(kind)
        container.session(rk).open_new()
        return ok(session_state(rk))

    @app.route("/api/<kind>/session/<record_id>", methods=["POST"], endpoint="session_edit")
    @json_errors
    def session_edit(kind: str, record_id: str):
        rk = RecordKind.parse(kind)
        container.session(rk).open_edit(record_id)
        return ok(session_state(rk))

    @app.route("/api/<kind>/session/submit", methods=["POST"], endpoint="session_submit")
    @json_errors
    def session_submit(kind: str):
        rk = RecordKind.parse(kind)
        session = container.session(rk)
        if not session.is_open:
            raise SessionClosedError("No open edit session to submit")
        # a payload that fails validation leaves the form open for correction
        partial = session.mode is SessionMode.EDIT and policy_for(rk).update is UpdateMode.MERGE
        payload = clean_payload(rk, request.get_json(silent=True), partial=partial)
        record = session.submit(payload)
        return ok(record.to_dict())

    @app.route("/api/<kind>/session", methods=["DELETE"], endpoint="session_close")
    @json_errors
    def session_close(kind: str):
        rk = RecordKind.parse(kind)
        container.session(rk).close()
        return ok(session_state(rk))
