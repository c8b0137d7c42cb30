from __future__ import annotations

from flask import current_app, jsonify, render_template, request
from sqlalchemy.exc import SQLAlchemyError

from ..services.sales_service import SaleError
from ..validation import ConflictError, NotFoundError, ValidationError, require_mapping


def json_body() -> dict:
    return require_mapping(request.get_json(silent=True))


def json_error(exc: Exception):
    """Map a service exception to the JSON error response."""
    if isinstance(exc, SaleError):
        return jsonify({"error": str(exc), "details": exc.details}), 400
    if isinstance(exc, ValidationError):
        return jsonify({"error": str(exc)}), 400
    if isinstance(exc, NotFoundError):
        return jsonify({"error": str(exc)}), 404
    if isinstance(exc, ConflictError):
        return jsonify({"error": str(exc)}), 409
    if isinstance(exc, SQLAlchemyError):
        current_app.logger.exception("Database error on %s %s", request.method, request.path)
        return jsonify({"error": str(exc.__cause__ or exc)}), 500
    current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({"error": "Internal server error"}), 500


def not_implemented(feature: str):
    return jsonify({
        "error": "Not implemented",
        "feature": feature,
        "message": f"{feature} is not available in this version",
    }), 501


def status_for(exc: Exception) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, ConflictError):
        return 409
    return 500


def render_error(exc: Exception):
    status = status_for(exc)
    if status == 500:
        current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
    return render_template("error.html", title="Error", error=str(exc)), status
