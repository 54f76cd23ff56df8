from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.settings import KioskSettings, split_csv
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .settings.controller import register as register_settings

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the API.

    Pass `container` to run against pre-wired (e.g. in-memory) services; the
    database is then never touched.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    origins = list(split_csv(getattr(settings, "CORS_ORIGINS", "*"))) or ["*"]
    CORS(app, resources={r"/api/*": {"origins": origins}})

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")

        if app.config["DEBUG"]:
            print(
                "[mess-attendance] settings=", settings_module,
                " db=", f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            if app.config["DEBUG"]:
                print(f"[mess-attendance] schema ready (tables={len(list_tables(db_config))})")

        container = build_container(db_config=db_config, kiosk=KioskSettings.from_settings_module(settings))

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return "Mess Attendance API"

    register_employees(app, container)
    register_attendance(app, container)
    register_analytics(app, container)
    register_settings(app, container)

    app.logger.info(
        "Device policy=%s (%d authorized devices), timezone=%s, geofence=%s",
        container.kiosk.device_policy.value,
        len(container.kiosk.authorized_devices),
        container.kiosk.timezone,
        "on" if container.kiosk.geofence else "off",
    )
    return app
