from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.exceptions import AuthenticationError, DomainError, NotFoundError, ValidationError
from .members.controller import register as register_members
from .operations.controller import register as register_operations
from .reports.controller import register as register_reports
from .users.controller import register as register_users


def _error_status(exc: DomainError) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, ValidationError):
        return 400
    return 422


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_DAYS"] = int(getattr(settings, "SESSION_DAYS", 7))
    app.permanent_session_lifetime = timedelta(days=app.config["SESSION_DAYS"])
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        container = build_container(
            users_store_path=getattr(settings, "USERS_STORE_PATH", "") or None,
            seed_demo_members=bool(getattr(settings, "SEED_DEMO_MEMBERS", False)),
        )
    app.extensions["brigade_pay"] = container

    app.logger.info(
        "[brigade-pay] settings=%s members=%d users_store=%s",
        settings_module,
        len(container.state.members),
        getattr(settings, "USERS_STORE_PATH", "") or "memory",
    )

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        return jsonify({"success": False, "message": str(exc)}), _error_status(exc)

    register_users(app, container)
    register_members(app, container)
    register_operations(app, container)
    register_reports(app, container)

    return app
