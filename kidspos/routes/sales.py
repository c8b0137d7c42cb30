# Overview: sale views for the JSON API and the server-rendered pages.

from flask import jsonify, redirect, render_template, request, url_for

from ..services import get_services
from ..services.sales_service import SaleError, SaleLineRequest
from ..validation import ValidationError, coerce_int
from .helpers import json_body
from kidspos.time_utils import parse_iso_datetime


def _parse_sale_at(value):
    if value is not None and not isinstance(value, str):
        raise ValidationError("saleAt must be an ISO-8601 datetime")
    try:
        return parse_iso_datetime(value)
    except ValueError:
        raise ValidationError("saleAt must be an ISO-8601 datetime")


def api_list_sales():
    sales = get_services().sales.list_sales()
    return jsonify([sale.to_dict() for sale in sales]), 200


def api_get_sale(sale_id: int):
    sale = get_services().sales.get_sale(sale_id)
    return jsonify(sale.to_dict()), 200


def api_create_sale():
    data = json_body()
    details = data.get("details") or []
    if not isinstance(details, list):
        raise SaleError("details must be a list")

    sale = get_services().sales.create_sale(
        store_id=data.get("storeId"),
        staff_id=data.get("staffId"),
        deposit=data.get("deposit"),
        sale_at=_parse_sale_at(data.get("saleAt")),
        lines=[SaleLineRequest.from_mapping(line) for line in details],
    )
    return jsonify(sale.to_dict()), 201


# --- web ---

def _form_lines() -> list[SaleLineRequest]:
    item_ids = request.form.getlist("itemId[]")
    quantities = request.form.getlist("quantity[]")
    lines = []
    for index, raw_item_id in enumerate(item_ids):
        if not raw_item_id.strip():
            continue
        raw_quantity = quantities[index] if index < len(quantities) else ""
        lines.append(SaleLineRequest(
            item_id=coerce_int(raw_item_id, "itemId", default=0),
            quantity=coerce_int(raw_quantity, "quantity", default=0),
        ))
    return lines


def _sale_form(status: int = 200, **context):
    services = get_services()
    return render_template(
        "sales/new.html",
        title="New Sale",
        items=services.items.list_items(),
        stores=services.stores.list_stores(),
        staffs=services.staffs.list_staffs(),
        **context,
    ), status


def sales_index():
    sales = get_services().sales.list_sales()
    return render_template("sales/index.html", title="Sales", sales=sales)


def sales_new():
    return _sale_form()


def sales_create():
    submitted = {
        "storeId": request.form.get("storeId", ""),
        "staffId": request.form.get("staffId", ""),
        "deposit": request.form.get("deposit", ""),
    }
    try:
        get_services().sales.create_sale(
            store_id=request.form.get("storeId"),
            staff_id=request.form.get("staffId"),
            deposit=request.form.get("deposit"),
            lines=_form_lines(),
        )
    except ValidationError as exc:
        return _sale_form(400, error=str(exc), sale=submitted)
    return redirect(url_for("web.sales_index"), code=303)
