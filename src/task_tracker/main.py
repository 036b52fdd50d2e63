from __future__ import annotations

import importlib
import logging
import time
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .container import Container, build_container
from .core.exceptions import ConstraintViolationError, StorageError, ValidationError
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .logging_setup import setup_logging
from .tasks.controller import register as register_tasks

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"message": e.message, "errors": e.errors}), 400

    @app.errorhandler(ConstraintViolationError)
    def _constraint_error(e: ConstraintViolationError):
        return jsonify({"message": str(e)}), 409

    @app.errorhandler(StorageError)
    def _storage_error(e: StorageError):
        logger.error("Storage failure on %s %s: %s", request.method, request.path, e)
        return jsonify({"message": "Storage unavailable"}), 500

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def _unexpected_error(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"message": "Internal server error"}), 500


def _register_request_logging(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        if request.path.startswith("/api"):
            started = g.get("request_started")
            elapsed_ms = int((time.perf_counter() - started) * 1000) if started else 0
            logger.info("%s %s %s in %sms", request.method, request.path, response.status_code, elapsed_ms)
        return response


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    ``container`` lets callers (tests) supply pre-wired services; otherwise
    one is built from the selected settings module's DB_CONFIG.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("Starting task tracker settings=%s", settings_module)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "Database %s@%s:%s/%s",
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
        container = build_container(db_config=db_config)

    _register_error_handlers(app)
    _register_request_logging(app)

    register_employees(app, container)
    register_tasks(app, container)
    register_dashboard(app, container)

    return app
