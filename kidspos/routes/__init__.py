# Overview: route table and blueprint registration for the API and web pages.

from __future__ import annotations

from flask import Blueprint, Flask, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from ..validation import ConflictError, NotFoundError, ValidationError
from . import apk, items, reports, sales, settings, staffs, stores, system
from .helpers import json_error, render_error

# (method, rule, endpoint, view); rules are relative to the blueprint prefix
API_ROUTES = (
    ("GET", "/items", "list_items", items.api_list_items),
    ("POST", "/items", "create_item", items.api_create_item),
    ("GET", "/items/<int:item_id>", "get_item", items.api_get_item),
    ("PUT", "/items/<int:item_id>", "update_item", items.api_update_item),
    ("PATCH", "/items/<int:item_id>", "patch_item", items.api_patch_item),
    ("DELETE", "/items/<int:item_id>", "delete_item", items.api_delete_item),
    ("GET", "/items/barcode/<barcode>", "get_item_by_barcode", items.api_get_item_by_barcode),

    ("GET", "/sales", "list_sales", sales.api_list_sales),
    ("POST", "/sales", "create_sale", sales.api_create_sale),
    ("GET", "/sales/<int:sale_id>", "get_sale", sales.api_get_sale),

    ("GET", "/stores", "list_stores", stores.api_list_stores),
    ("POST", "/stores", "create_store", stores.api_create_store),
    ("GET", "/stores/<int:store_id>", "get_store", stores.api_get_store),
    ("PUT", "/stores/<int:store_id>", "update_store", stores.api_update_store),
    ("DELETE", "/stores/<int:store_id>", "delete_store", stores.api_delete_store),

    ("GET", "/staffs", "list_staffs", staffs.api_list_staffs),
    ("POST", "/staffs", "create_staff", staffs.api_create_staff),
    ("GET", "/staffs/<int:staff_id>", "get_staff", staffs.api_get_staff),
    ("PUT", "/staffs/<int:staff_id>", "update_staff", staffs.api_update_staff),
    ("DELETE", "/staffs/<int:staff_id>", "delete_staff", staffs.api_delete_staff),
    ("GET", "/staffs/barcode/<barcode>", "get_staff_by_barcode", staffs.api_get_staff_by_barcode),
    ("PUT", "/staffs/barcode/<barcode>", "update_staff_by_barcode", staffs.api_update_staff_by_barcode),
    ("DELETE", "/staffs/barcode/<barcode>", "delete_staff_by_barcode", staffs.api_delete_staff_by_barcode),

    # Handheld app names staff "users"
    ("GET", "/users", "list_users", staffs.api_list_users),
    ("POST", "/users", "create_user", staffs.api_create_staff),
    ("GET", "/users/<barcode>", "get_user", staffs.api_get_staff_by_barcode),
    ("PUT", "/users/<barcode>", "update_user", staffs.api_update_staff_by_barcode),
    ("DELETE", "/users/<barcode>", "delete_user", staffs.api_delete_staff_by_barcode),

    ("GET", "/settings", "list_settings", settings.api_list_settings),
    ("POST", "/settings", "create_setting", settings.api_create_setting),
    ("GET", "/settings/status", "settings_status", settings.api_settings_status),
    ("GET", "/settings/application", "application_info", settings.api_application_info),
    ("GET", "/settings/<key>", "get_setting", settings.api_get_setting),
    ("PUT", "/settings/<key>", "update_setting", settings.api_update_setting),
    ("DELETE", "/settings/<key>", "delete_setting", settings.api_delete_setting),

    ("GET", "/reports/sales", "sales_report", reports.api_sales_report),
    ("GET", "/reports/sales/pdf", "sales_report_pdf", reports.api_sales_report_pdf),
    ("GET", "/reports/sales/excel", "sales_report_excel", reports.api_sales_report_excel),

    ("GET", "/apk/version/latest", "apk_latest", apk.api_latest_version),
    ("GET", "/apk/version/check", "apk_check", apk.api_check_update),
    ("GET", "/apk/version/all", "apk_all", apk.api_list_versions),
    ("GET", "/apk/download/latest", "apk_download_latest", apk.api_download_latest),
    ("GET", "/apk/download/<int:apk_id>", "apk_download", apk.api_download),
    ("POST", "/apk/upload", "apk_upload", apk.api_upload),
    ("DELETE", "/apk/version/<int:apk_id>", "apk_delete", apk.api_delete_version),
    ("PUT", "/apk/version/<int:apk_id>/deactivate", "apk_deactivate", apk.api_deactivate_version),

    ("GET", "/health", "health", system.api_health),
)

WEB_ROUTES = (
    ("GET", "/", "home", system.home),

    ("GET", "/items", "items_index", items.items_index),
    ("GET", "/items/new", "items_new", items.items_new),
    ("POST", "/items", "items_create", items.items_create),
    ("GET", "/items/<int:item_id>/edit", "items_edit", items.items_edit),
    ("POST", "/items/<int:item_id>", "items_update", items.items_update),
    ("POST", "/items/<int:item_id>/delete", "items_delete", items.items_delete),

    ("GET", "/sales", "sales_index", sales.sales_index),
    ("GET", "/sales/new", "sales_new", sales.sales_new),
    ("POST", "/sales", "sales_create", sales.sales_create),

    ("GET", "/stores", "stores_index", stores.stores_index),
    ("GET", "/stores/new", "stores_new", stores.stores_new),
    ("POST", "/stores", "stores_create", stores.stores_create),
    ("GET", "/stores/<int:store_id>/edit", "stores_edit", stores.stores_edit),
    ("POST", "/stores/<int:store_id>", "stores_update", stores.stores_update),
    ("POST", "/stores/<int:store_id>/delete", "stores_delete", stores.stores_delete),

    ("GET", "/staffs", "staffs_index", staffs.staffs_index),
    ("GET", "/staffs/new", "staffs_new", staffs.staffs_new),
    ("POST", "/staffs", "staffs_create", staffs.staffs_create),
    ("GET", "/staffs/<int:staff_id>/edit", "staffs_edit", staffs.staffs_edit),
    ("POST", "/staffs/<int:staff_id>", "staffs_update", staffs.staffs_update),
    ("POST", "/staffs/<int:staff_id>/delete", "staffs_delete", staffs.staffs_delete),

    ("GET", "/settings", "settings_index", settings.settings_index),
    ("POST", "/settings", "settings_create", settings.settings_create),
    ("POST", "/settings/<key>", "settings_update", settings.settings_update),
    ("POST", "/settings/<key>/delete", "settings_delete", settings.settings_delete),

    ("GET", "/reports/sales", "reports_sales", reports.reports_sales),

    ("GET", "/apk", "apk_index", apk.apk_index),
    ("GET", "/apk/upload", "apk_upload_form", apk.apk_upload_form),
    ("POST", "/apk/upload", "apk_upload", apk.apk_upload),
    ("POST", "/apk/<int:apk_id>/deactivate", "apk_deactivate", apk.apk_deactivate),
    ("POST", "/apk/<int:apk_id>/delete", "apk_delete", apk.apk_delete),
)


def _add_routes(bp: Blueprint, table) -> None:
    for method, rule, endpoint, view in table:
        bp.add_url_rule(rule, endpoint=endpoint, view_func=view, methods=[method])


def _http_error(exc: HTTPException):
    # Routing 404/405 never reach blueprint handlers
    if request.path.startswith("/api/"):
        return jsonify({"error": exc.description or exc.name}), exc.code
    return exc


def register_routes(app: Flask) -> None:
    # One blueprint pair per app instance
    api_bp = Blueprint("api", __name__, url_prefix="/api")
    web_bp = Blueprint("web", __name__)

    _add_routes(api_bp, API_ROUTES)
    _add_routes(web_bp, WEB_ROUTES)

    for exc_class in (ValidationError, NotFoundError, ConflictError, SQLAlchemyError):
        api_bp.register_error_handler(exc_class, json_error)

    for exc_class in (ValidationError, NotFoundError, ConflictError):
        web_bp.register_error_handler(exc_class, render_error)

    app.register_blueprint(api_bp)
    app.register_blueprint(web_bp)
    app.register_error_handler(HTTPException, _http_error)
