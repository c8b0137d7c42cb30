# Overview: store views for the JSON API and the server-rendered pages.

from flask import jsonify, redirect, render_template, request, url_for

from ..services import get_services
from ..validation import ConflictError, ValidationError
from .helpers import json_body, render_error


def api_list_stores():
    stores = get_services().stores.list_stores()
    return jsonify([store.to_dict() for store in stores]), 200


def api_get_store(store_id: int):
    store = get_services().stores.get_store(store_id)
    return jsonify(store.to_dict()), 200


def api_create_store():
    data = json_body()
    store = get_services().stores.create_store(name=data.get("name"), store_id=data.get("storeId"))
    return jsonify(store.to_dict()), 201


def api_update_store(store_id: int):
    data = json_body()
    store = get_services().stores.update_store(store_id, name=data.get("name"))
    return jsonify(store.to_dict()), 200


def api_delete_store(store_id: int):
    get_services().stores.delete_store(store_id)
    return jsonify({"message": "Store deleted successfully"}), 200


# --- web ---

def stores_index(error: str | None = None, status: int = 200):
    stores = get_services().stores.list_stores()
    return render_template("stores/index.html", title="Stores", stores=stores, error=error), status


def stores_new():
    return render_template("stores/form.html", title="New Store", store=None)


def stores_create():
    try:
        get_services().stores.create_store(name=request.form.get("name"))
    except (ValidationError, ConflictError) as exc:
        store = {"name": request.form.get("name", "")}
        return render_template("stores/form.html", title="New Store", store=store, error=str(exc)), 400
    return redirect(url_for("web.stores_index"), code=303)


def stores_edit(store_id: int):
    try:
        store = get_services().stores.get_store(store_id)
    except LookupError as exc:
        return render_error(exc)
    return render_template("stores/form.html", title="Edit Store", store=store)


def stores_update(store_id: int):
    try:
        get_services().stores.update_store(store_id, name=request.form.get("name"))
    except ValidationError as exc:
        store = {"id": store_id, "name": request.form.get("name", "")}
        return render_template("stores/form.html", title="Edit Store", store=store, error=str(exc)), 400
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.stores_index"), code=303)


def stores_delete(store_id: int):
    try:
        get_services().stores.delete_store(store_id)
    except ConflictError as exc:
        return stores_index(error=str(exc), status=409)
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.stores_index"), code=303)
