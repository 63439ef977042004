from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import MEMORY_BACKEND, MYSQL_BACKEND, Container, build_container
from .database.bootstrap import apply_schema
from .announcements.controller import register as register_announcements
from .employees.controller import register as register_employees
from .finance.controller import register as register_finance
from .fleet.controller import register as register_fleet
from .leave.controller import register as register_leave
from .memory.demo_data import load_demo_data
from .memory.store import InMemoryStore
from .payroll.controller import register as register_payroll
from .worklogs.controller import register as register_worklogs
from .worksites.controller import register as register_worksites

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        backend = getattr(settings, "STORAGE_BACKEND", MEMORY_BACKEND)
        db_config = getattr(settings, "DB_CONFIG", None)
        logger.info("settings=%s backend=%s", settings_module, backend)

        if backend == MYSQL_BACKEND:
            if getattr(settings, "AUTO_INIT_DB", False):
                apply_schema(db_config)
            container = build_container(backend=MYSQL_BACKEND, db_config=db_config)
        else:
            store = InMemoryStore()
            if getattr(settings, "SEED_DEMO_DATA", False):
                load_demo_data(store)
            container = build_container(backend=MEMORY_BACKEND, store=store)

    app.extensions["container"] = container

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def health():
        return jsonify({"success": True, "status": "ok"})

    register_employees(app, container)
    register_worklogs(app, container)
    register_payroll(app, container)
    register_finance(app, container)
    register_leave(app, container)
    register_fleet(app, container)
    register_worksites(app, container)
    register_announcements(app, container)

    return app
