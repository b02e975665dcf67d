from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import format_iso_date, today_local
from .container import build_container
from .dashboard.controller import register as register_dashboard
from .records.controller import register as register_records
from .seed import seed_demo_data

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_WINDOW"] = getattr(settings, "DEFAULT_WINDOW", "week")
    app.json.sort_keys = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("settings=%s debug=%s", settings_module, app.config["DEBUG"])

    container = build_container(rank_limit=int(getattr(settings, "ABSENCE_RANK_LIMIT", 5)))
    app.extensions["school_register"] = container

    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        seed_demo_data(container.records, today=format_iso_date(today_local()))

    register_attendance(app, container)
    register_dashboard(app, container)
    register_records(app, container)

    return app
