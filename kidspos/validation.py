from __future__ import annotations

from typing import Any


# Largest amount, count or code accepted from clients. Keeps prices,
# stock, quantities and sale totals well inside a SQLite INTEGER.
MAX_INT = 999_999_999


class ValidationError(ValueError):
    """400-level input problem."""


class NotFoundError(LookupError):
    """404-level: unknown id, key or barcode."""


class ConflictError(ValueError):
    """409-level business rule conflict (e.g., duplicate setting key)."""


class ReferencedError(ConflictError):
    """Hard delete rejected because other rows still point at the target."""


def check_int_range(value: int, field: str, *, max_value: int = MAX_INT) -> int:
    if value > max_value or value < -max_value:
        raise ValidationError(f"{field} must be between -{max_value} and {max_value}")
    return value


def coerce_int(value: Any, field: str, *, default: int | None = None, max_value: int = MAX_INT) -> int | None:
    """
    Strict integer parsing for JSON and form input.

    None and blank strings return `default`. Floats, booleans, decimals and
    scientific notation are rejected, as is anything beyond +/- max_value.
    """
    if value is None:
        return default

    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")

    if isinstance(value, int):
        return check_int_range(value, field, max_value=max_value)

    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return default
        if "e" in stripped.lower():
            raise ValidationError(f"{field} must be a plain integer (scientific notation not allowed)")
        if "." in stripped:
            raise ValidationError(f"{field} must be an integer (no decimals)")
        try:
            parsed = int(stripped)
        except ValueError:
            raise ValidationError(f"{field} must be an integer")
        return check_int_range(parsed, field, max_value=max_value)

    if isinstance(value, float):
        raise ValidationError(f"{field} must be an integer, not a decimal")

    raise ValidationError(f"{field} must be an integer")


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def require_text(value: Any, message: str) -> str:
    text = clean_text(value)
    if not text:
        raise ValidationError(message)
    return text


def require_mapping(payload: Any) -> dict:
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON payload")
    return payload
