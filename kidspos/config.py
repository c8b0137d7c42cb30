# kidspos/config.py
from __future__ import annotations
import os


def _env_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _database_uri() -> str:
    url = os.environ.get("DATABASE_URL")
    if url:
        return url
    return "sqlite:///" + os.path.abspath(os.environ.get("DATABASE_PATH", "kidspos.db"))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # DATABASE_URL wins; otherwise a SQLite file at DATABASE_PATH
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    PORT = _env_int("PORT", 8080)
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Receipt printer and encryption are configured but not wired to any feature yet
    RECEIPT_PRINTER_HOST = os.environ.get("RECEIPT_PRINTER_HOST", "localhost")
    RECEIPT_PRINTER_PORT = _env_int("RECEIPT_PRINTER_PORT", 9100)
    QR_CODE_SIZE = _env_int("QR_CODE_SIZE", 200)
    ALLOWED_IP_PREFIX = os.environ.get("ALLOWED_IP_PREFIX", "192.168.")
    ENCRYPTION_KEY = os.environ.get("ENCRYPTION_KEY", "DefaultKidsPOSKey123!@#")

    APK_UPLOAD_DIR = os.environ.get("APK_UPLOAD_DIR", os.path.join(".", "uploads", "apk"))
    APK_MAX_FILE_SIZE = _env_int("APK_MAX_FILE_SIZE", 100 * 1024 * 1024)
    # Leave headroom above the APK limit so the service reports the size error
    MAX_CONTENT_LENGTH = APK_MAX_FILE_SIZE + 1024 * 1024

    APP_VERSION = "1.0.0"
