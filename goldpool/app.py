from __future__ import annotations

import random
from typing import Optional

from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from drawengine.errors import InvalidAngle, InvalidState, MissingParticipant

from .config import load_settings
from .db import init_db
from .routes.admin import bp as admin_bp
from .routes.config import bp as config_bp
from .routes.draw import SESSION_KEY, bp as draw_bp
from .routes.health import bp as health_bp
from .routes.pool import bp as pool_bp
from .routes.results import bp as results_bp
from .services.draw_session import DrawSession


def _validation_messages(exc: ValidationError) -> list:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return messages


def create_app(rng: Optional[random.Random] = None) -> Flask:
    settings = load_settings()
    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.flask.secret_key
    app.config["DEBUG"] = settings.flask.debug
    init_db()

    app.extensions[SESSION_KEY] = DrawSession(settings.wheel, settings.language, rng=rng)

    app.register_blueprint(health_bp)
    app.register_blueprint(config_bp)
    app.register_blueprint(pool_bp, url_prefix="/pool")
    app.register_blueprint(draw_bp, url_prefix="/draw")
    app.register_blueprint(results_bp, url_prefix="/results")
    app.register_blueprint(admin_bp, url_prefix="/admin/api")

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        details = _validation_messages(exc)
        return jsonify({"error": details[0] if details else "invalid request", "details": details}), 400

    @app.errorhandler(InvalidAngle)
    def handle_invalid_angle(exc: InvalidAngle):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(InvalidState)
    def handle_invalid_state(exc: InvalidState):
        app.logger.warning("Rejected draw operation: %s", exc)
        return jsonify({"error": str(exc)}), 409

    @app.errorhandler(MissingParticipant)
    def handle_missing_participant(exc: MissingParticipant):
        app.logger.error("Draw results inconsistent with pool: %s", exc)
        return jsonify({"error": str(exc)}), 500

    @app.errorhandler(Exception)
    def handle_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify({"error": str(exc)}), 500

    return app
