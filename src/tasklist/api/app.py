# src/tasklist/api/app.py

"""
Flask application factory.

Mounts:
- GraphQL endpoint (GET/POST, path from settings.graphql_path)
- HTTP task routes (/tasks, ...)
- /health
"""

from __future__ import annotations

import json
import logging
from typing import Any

from flask import Flask, jsonify, request

from ..core.errors import StoreError
from ..core.state import AppState
from .graphql_schema import execute_query
from .http_controller import SERVICE_EXTENSION_KEY, tasks_bp

logger = logging.getLogger(__name__)


class _BadGraphQLRequest(Exception):
    pass


def _graphql_params() -> tuple[str, dict[str, Any] | None, str | None]:
    """Extract (query, variables, operation_name) from the current request."""
    if request.method == "GET":
        query = request.args.get("query")
        operation_name = request.args.get("operationName")
        raw_vars = request.args.get("variables")
        variables: Any = None
        if raw_vars:
            try:
                variables = json.loads(raw_vars)
            except ValueError as exc:
                raise _BadGraphQLRequest("Variables are invalid JSON.") from exc
    else:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise _BadGraphQLRequest("POST body must be a JSON object.")
        query = data.get("query")
        variables = data.get("variables")
        operation_name = data.get("operationName")

    if not isinstance(query, str) or not query.strip():
        raise _BadGraphQLRequest("Must provide query string.")
    if variables is not None and not isinstance(variables, dict):
        raise _BadGraphQLRequest("Variables must be an object.")
    return query, variables, operation_name


def create_app(state: AppState) -> Flask:
    app = Flask(__name__)
    app.extensions[SERVICE_EXTENSION_KEY] = state.task_service
    app.register_blueprint(tasks_bp)

    graphql_path = getattr(state.settings, "graphql_path", "/graphql")

    @app.route(graphql_path, methods=["GET", "POST"])
    def graphql_view():
        try:
            query, variables, operation_name = _graphql_params()
        except _BadGraphQLRequest as exc:
            return jsonify({"errors": [{"message": str(exc)}]}), 400

        body = execute_query(
            state.task_service,
            query,
            variables=variables,
            operation_name=operation_name,
        )
        # Resolver errors still return 200 with partial data; a request that
        # never reached execution (parse/validation) has no data at all.
        status = 400 if body.get("data") is None and "errors" in body else 200
        return jsonify(body), status

    @app.route("/health", methods=["GET"])
    def health():
        try:
            total = state.task_store.count_tasks()
        except StoreError as exc:
            return jsonify({"status": "error", "error": exc.message}), 503
        return jsonify({"status": "ok", "tasks": total})

    logger.info("HTTP app created (graphql=%s)", graphql_path)
    return app
