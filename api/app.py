"""Flask HTTP endpoint exposing the in-memory expense store."""

from __future__ import annotations

import logging
import os
from typing import Optional

from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from werkzeug.exceptions import MethodNotAllowed as WerkzeugMethodNotAllowed

from common.dispatch import ALLOWED_METHODS, DispatchResult, ExpenseDispatcher
from common.services import ExpenseStore

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
    "Access-Control-Allow-Headers": "Content-Type",
}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


def create_app(store: Optional[ExpenseStore] = None) -> Flask:
    app = Flask(__name__)

    env_name = os.getenv("EXPENSE_API_ENV", "prod").lower()
    app.debug = env_name in {"dev", "development"}
    level_name = os.getenv("EXPENSE_API_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        app.logger.warning("Unknown EXPENSE_API_LOG_LEVEL %r, falling back to INFO", level_name)
        level = logging.INFO
    app.logger.setLevel(level)

    if store is None:
        store = ExpenseStore.with_seed_data() if _env_flag("EXPENSE_API_SEED", True) else ExpenseStore()
    dispatcher = ExpenseDispatcher(store)
    app.extensions["expense_store"] = store

    # Registered before CORS() so it runs after flask_cors and only fills gaps.
    @app.after_request
    def apply_cors_headers(response: Response) -> Response:
        for header, value in CORS_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        methods=list(ALLOWED_METHODS),
        allow_headers=["Content-Type"],
        send_wildcard=True,
    )

    def _respond(result: DispatchResult):
        if result.payload is None:
            return ("", result.status)
        return jsonify(result.payload), result.status

    @app.errorhandler(WerkzeugMethodNotAllowed)
    def handle_method_not_allowed(exc: WerkzeugMethodNotAllowed):
        app.logger.error("%s %s rejected: method not allowed", request.method, request.path)
        return _respond(dispatcher.dispatch(request.method))

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        app.logger.exception("Unhandled error while serving %s %s", request.method, request.path)
        return jsonify({"success": False, "error": "Internal server error."}), 500

    @app.route("/", methods=list(ALLOWED_METHODS))
    @app.route("/<path:subpath>", methods=list(ALLOWED_METHODS))
    def expenses(subpath: str = ""):
        # Flask answers HEAD through the GET view.
        method = "GET" if request.method == "HEAD" else request.method
        body = request.get_json(silent=True) if method == "POST" else None
        result = dispatcher.dispatch(method, body)
        if result.status >= 400:
            app.logger.error("%s %s rejected: %s", method, request.path, result.payload["error"])
        elif result.status == 201:
            app.logger.info("Created expense %s", result.payload["data"]["id"])
        return _respond(result)

    return app

