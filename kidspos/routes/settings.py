# Overview: setting views for the JSON API and the server-rendered pages.

from __future__ import annotations

from flask import current_app, jsonify, redirect, render_template, request, url_for

from ..extensions import db
from ..services import get_services
from ..validation import ConflictError, ValidationError
from .helpers import json_body, render_error
from kidspos.time_utils import to_utc_z, utcnow


def api_list_settings():
    settings = get_services().settings.list_settings()
    return jsonify([setting.to_dict() for setting in settings]), 200


def api_get_setting(key: str):
    setting = get_services().settings.get_setting(key)
    return jsonify(setting.to_dict()), 200


def api_create_setting():
    data = json_body()
    setting = get_services().settings.create_setting(
        key=data.get("key"),
        value=data.get("value"),
        type=data.get("type"),
        description=data.get("description"),
    )
    return jsonify(setting.to_dict()), 201


def api_update_setting(key: str):
    data = json_body()
    setting = get_services().settings.update_setting(key, data.get("value"))
    return jsonify({"message": "Setting updated successfully", "setting": setting.to_dict()}), 200


def api_delete_setting(key: str):
    get_services().settings.delete_setting(key)
    return jsonify({"message": "Setting deleted successfully"}), 200


def api_settings_status():
    return jsonify({"status": "OK", "timestamp": to_utc_z(utcnow())}), 200


def api_application_info():
    config = current_app.config
    return jsonify({
        "version": config.get("APP_VERSION"),
        "environment": "testing" if config.get("TESTING") else ("development" if current_app.debug else "production"),
        "database": db.engine.dialect.name,
        "receiptPrinter": {
            "host": config.get("RECEIPT_PRINTER_HOST"),
            "port": config.get("RECEIPT_PRINTER_PORT"),
        },
        "qrCodeSize": config.get("QR_CODE_SIZE"),
        "allowedIpPrefix": config.get("ALLOWED_IP_PREFIX"),
        "features": {
            "pdf_generation": False,
            "excel_export": False,
            "printer_support": False,
        },
    }), 200


# --- web ---

def settings_index(error: str | None = None, status: int = 200, form: dict | None = None):
    settings = get_services().settings.list_settings()
    return render_template(
        "settings/index.html", title="Settings", settings=settings, error=error, form=form or {}
    ), status


def settings_create():
    form = {
        "key": request.form.get("key", ""),
        "value": request.form.get("value", ""),
        "type": request.form.get("type", "string"),
        "description": request.form.get("description", ""),
    }
    try:
        get_services().settings.create_setting(**form)
    except (ValidationError, ConflictError) as exc:
        return settings_index(error=str(exc), status=400 if isinstance(exc, ValidationError) else 409, form=form)
    return redirect(url_for("web.settings_index"), code=303)


def settings_update(key: str):
    try:
        get_services().settings.update_setting(key, request.form.get("value"))
    except ValidationError as exc:
        return settings_index(error=str(exc), status=400)
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.settings_index"), code=303)


def settings_delete(key: str):
    try:
        get_services().settings.delete_setting(key)
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.settings_index"), code=303)
