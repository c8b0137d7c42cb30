# Overview: staff views for the JSON API and the server-rendered pages.

from flask import jsonify, redirect, render_template, request, url_for

from ..services import get_services
from ..validation import ConflictError, ValidationError
from .helpers import json_body, render_error


def api_list_staffs():
    staffs = get_services().staffs.list_staffs()
    return jsonify([staff.to_dict() for staff in staffs]), 200


def api_get_staff(staff_id: int):
    staff = get_services().staffs.get_staff(staff_id)
    return jsonify(staff.to_dict()), 200


def api_create_staff():
    data = json_body()
    staff = get_services().staffs.create_staff(name=data.get("name"), staff_id=data.get("staffId"))
    return jsonify(staff.to_dict()), 201


def api_update_staff(staff_id: int):
    data = json_body()
    staff = get_services().staffs.update_staff(staff_id, name=data.get("name"))
    return jsonify(staff.to_dict()), 200


def api_delete_staff(staff_id: int):
    get_services().staffs.delete_staff(staff_id)
    return jsonify({"message": "Staff deleted successfully"}), 200


def api_list_users():
    """Staff list under the handheld app's /api/users name."""
    staffs = get_services().staffs.list_staffs()
    return jsonify({"users": [staff.to_dict() for staff in staffs]}), 200


def api_get_staff_by_barcode(barcode: str):
    staff = get_services().staffs.find_by_barcode(barcode)
    return jsonify(staff.to_dict()), 200


def api_update_staff_by_barcode(barcode: str):
    data = json_body()
    staff = get_services().staffs.update_staff_by_barcode(barcode, name=data.get("name"))
    return jsonify(staff.to_dict()), 200


def api_delete_staff_by_barcode(barcode: str):
    get_services().staffs.delete_staff_by_barcode(barcode)
    return jsonify({"message": "Staff deleted successfully"}), 200


# --- web ---

def staffs_index(error: str | None = None, status: int = 200):
    staffs = get_services().staffs.list_staffs()
    return render_template("staffs/index.html", title="Staffs", staffs=staffs, error=error), status


def staffs_new():
    return render_template("staffs/form.html", title="New Staff", staff=None)


def staffs_create():
    try:
        get_services().staffs.create_staff(name=request.form.get("name"))
    except (ValidationError, ConflictError) as exc:
        staff = {"name": request.form.get("name", "")}
        return render_template("staffs/form.html", title="New Staff", staff=staff, error=str(exc)), 400
    return redirect(url_for("web.staffs_index"), code=303)


def staffs_edit(staff_id: int):
    try:
        staff = get_services().staffs.get_staff(staff_id)
    except LookupError as exc:
        return render_error(exc)
    return render_template("staffs/form.html", title="Edit Staff", staff=staff)


def staffs_update(staff_id: int):
    try:
        get_services().staffs.update_staff(staff_id, name=request.form.get("name"))
    except ValidationError as exc:
        staff = {"id": staff_id, "name": request.form.get("name", "")}
        return render_template("staffs/form.html", title="Edit Staff", staff=staff, error=str(exc)), 400
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.staffs_index"), code=303)


def staffs_delete(staff_id: int):
    try:
        get_services().staffs.delete_staff(staff_id)
    except ConflictError as exc:
        return staffs_index(error=str(exc), status=409)
    except LookupError as exc:
        return render_error(exc)
    return redirect(url_for("web.staffs_index"), code=303)
