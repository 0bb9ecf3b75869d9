"""Employee Management package.

Organized by feature modules (departments, employees, dashboard) with a thin
Flask controller layer over service and repository layers.
"""
from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.error_handlers import register as register_error_handlers
from .container import build_container
from .core.logging_config import configure_logging
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import initialize_database
from .database.connection import db, describe_database, ensure_sqlite_directory
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "SQLALCHEMY_DATABASE_URI",
    "SQLALCHEMY_TRACK_MODIFICATIONS",
    "SQLALCHEMY_ENGINE_OPTIONS",
    "DEBUG",
    "TESTING",
    "AUTO_INIT_DB",
    "LOG_LEVEL",
    "LOG_DIR",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"), app.config.get("LOG_DIR"))

    database_uri = app.config.get("SQLALCHEMY_DATABASE_URI")
    if not database_uri:
        raise RuntimeError("SQLALCHEMY_DATABASE_URI is not configured")
    logger.info("settings=%s db=%s", settings_module, describe_database(database_uri))

    ensure_sqlite_directory(database_uri)
    db.init_app(app)

    if app.config.get("AUTO_INIT_DB", False):
        # A broken schema or seed step must stop the process.
        with app.app_context():
            initialize_database()

    container = build_container(db=db)
    app.extensions["ems_container"] = container

    register_error_handlers(app)
    register_dashboard(app, container)
    register_employees(app, container)
    register_departments(app, container)

    return app
