# Overview: item views for the JSON API and the server-rendered pages.

from flask import jsonify, redirect, render_template, request, url_for

from ..services import get_services
from ..validation import ValidationError
from .helpers import json_body, render_error


def api_list_items():
    items = get_services().items.list_items()
    return jsonify([item.to_dict() for item in items]), 200


def api_get_item(item_id: int):
    item = get_services().items.get_item(item_id)
    return jsonify(item.to_dict()), 200


def api_get_item_by_barcode(barcode: str):
    item = get_services().items.find_by_barcode(barcode)
    return jsonify(item.to_dict()), 200


def api_create_item():
    data = json_body()
    item = get_services().items.create_item(
        name=data.get("name"),
        price=data.get("price"),
        stock=data.get("stock"),
        item_id=data.get("itemId"),
    )
    return jsonify(item.to_dict()), 201


def api_update_item(item_id: int):
    data = json_body()
    item = get_services().items.update_item(
        item_id,
        name=data.get("name"),
        price=data.get("price"),
        stock=data.get("stock"),
    )
    return jsonify(item.to_dict()), 200


def api_patch_item(item_id: int):
    item = get_services().items.patch_item(item_id, json_body())
    return jsonify({"item": item.to_dict()}), 200


def api_delete_item(item_id: int):
    get_services().items.delete_item(item_id)
    return jsonify({"message": "Item deleted successfully"}), 200


# --- web ---

def _form_item(**extra) -> dict:
    return {
        "name": request.form.get("name", ""),
        "price": request.form.get("price", ""),
        "stock": request.form.get("stock", ""),
        **extra,
    }


def items_index():
    items = get_services().items.list_items()
    return render_template("items/index.html", title="Items", items=items)


def items_new():
    return render_template("items/form.html", title="New Item", item=None)


def items_create():
    try:
        get_services().items.create_item(
            name=request.form.get("name"),
            price=request.form.get("price"),
            stock=request.form.get("stock"),
        )
    except ValidationError as exc:
        return render_template(
            "items/form.html", title="New Item", item=_form_item(), error=str(exc)
        ), 400
    return redirect(url_for("web.items_index"), code=303)


def items_edit(item_id: int):
    try:
        item = get_services().items.get_item(item_id)
    except LookupError as exc:
        return render_error(exc)
    return render_template("items/form.html", title="Edit Item", item=item)


def items_update(item_id: int):
    try:
        get_services().items.update_item(
            item_id,
            name=request.form.get("name"),
            price=request.form.get("price"),
            stock=request.form.get("stock"),
        )
    except ValidationError as exc:
        return render_template(
            "items/form.html", title="Edit Item", item=_form_item(id=item_id), error=str(exc)
        ), 400
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.items_index"), code=303)


def items_delete(item_id: int):
    try:
        get_services().items.delete_item(item_id)
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.items_index"), code=303)
