"""
Dashboard and health endpoints.

The health check runs a couple of cheap queries so a load balancer or the
handheld app can tell a live process from a live process with a dead database.
"""

import time

from flask import current_app, render_template
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models import ApkVersion, Item, Sale, Staff, Store
from kidspos.time_utils import to_utc_z, utcnow


def check_database_health() -> dict:
    start_time = time.time()
    try:
        item_count = db.session.query(Item).filter(Item.is_deleted.is_(False)).count()
        sale_count = db.session.query(Sale).count()
        elapsed_ms = (time.time() - start_time) * 1000
        return {
            "status": "healthy",
            "latency_ms": round(elapsed_ms, 2),
            "details": {"items": item_count, "sales": sale_count},
        }
    except SQLAlchemyError:
        db.session.rollback()
        elapsed_ms = (time.time() - start_time) * 1000
        current_app.logger.exception("Database health check failed")
        return {
            "status": "unhealthy",
            "latency_ms": round(elapsed_ms, 2),
            "error": "Database error",
        }


def api_health():
    """Returns 200 when the database answers, 503 otherwise."""
    database_health = check_database_health()
    healthy = database_health["status"] == "healthy"
    response = {
        "status": "healthy" if healthy else "unhealthy",
        "version": current_app.config.get("APP_VERSION"),
        "timestamp": to_utc_z(utcnow()),
        "checks": {"database": database_health},
    }
    return response, 200 if healthy else 503


def home():
    counts = {
        "items": db.session.query(Item).filter(Item.is_deleted.is_(False)).count(),
        "stores": db.session.query(Store).count(),
        "staffs": db.session.query(Staff).count(),
        "sales": db.session.query(Sale).count(),
        "apks": db.session.query(ApkVersion).filter(ApkVersion.is_active.is_(True)).count(),
    }
    return render_template("index.html", title="KidsPOS", counts=counts)
