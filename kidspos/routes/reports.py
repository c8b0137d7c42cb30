# Overview: sales report views; file exports are declared but not built.

from flask import jsonify, render_template, request

from ..services import get_services
from ..validation import ValidationError
from .helpers import not_implemented
from kidspos.time_utils import end_of_range, parse_iso_datetime, to_utc_z


def _report_window():
    try:
        start = parse_iso_datetime(request.args.get("start"))
        end = end_of_range(request.args.get("end"))
    except ValueError:
        raise ValidationError("start and end must be ISO-8601 dates")
    return start, end


def api_sales_report():
    start, end = _report_window()
    report = get_services().sales.sales_report(start, end)
    return jsonify({
        "start": to_utc_z(start),
        "end": to_utc_z(end),
        "sales": [sale.to_dict() for sale in report["sales"]],
        "totalSales": report["totalSales"],
        "totalAmount": report["totalAmount"],
    }), 200


def api_sales_report_pdf():
    return not_implemented("PDF sales report")


def api_sales_report_excel():
    return not_implemented("Excel sales report")


def reports_sales():
    try:
        start, end = _report_window()
    except ValidationError as exc:
        report = get_services().sales.sales_report()
        return render_template("reports/sales.html", title="Sales Report", report=report, error=str(exc)), 400
    report = get_services().sales.sales_report(start, end)
    return render_template(
        "reports/sales.html",
        title="Sales Report",
        report=report,
        start=request.args.get("start", ""),
        end=request.args.get("end", ""),
    )
