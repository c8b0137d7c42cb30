"""
APK version lifecycle: upload, deactivate, delete and update checks.

The binary lives on disk and the metadata in apk_versions. There is no
transaction spanning both, so upload writes the file first and removes it
again if the row insert fails.
"""

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..models import ApkVersion, DeleteStrategy
from ..repositories import ApkVersionRepository
from ..validation import ConflictError, NotFoundError, ValidationError, clean_text, coerce_int
from kidspos.time_utils import utcnow

logger = logging.getLogger(__name__)

APK_EXTENSION = ".apk"
APK_MIMETYPE = "application/vnd.android.package-archive"


def _stream_size(file: FileStorage) -> int:
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


class ApkVersionService:
    delete_strategy = DeleteStrategy.HARD

    def __init__(self, apks: ApkVersionRepository, upload_dir: str | os.PathLike, max_file_size: int):
        self.apks = apks
        self.upload_dir = Path(upload_dir).absolute()
        self.max_file_size = max_file_size

    def list_versions(self) -> list[ApkVersion]:
        """Active versions, highest versionCode first."""
        return self.apks.find_all_active()

    def get_version(self, apk_id: int) -> ApkVersion:
        apk = self.apks.find_by_id(apk_id)
        if not apk:
            raise NotFoundError("APK version not found")
        return apk

    def get_latest(self) -> ApkVersion | None:
        return self.apks.find_latest()

    def check_for_update(self, current_version_code: int) -> ApkVersion | None:
        """Next release after the caller's build, or None when it is up to date."""
        return self.apks.find_next_after(current_version_code)

    def file_path(self, apk_id: int) -> Path:
        apk = self.get_version(apk_id)
        path = Path(apk.file_path)
        if not path.is_file():
            raise NotFoundError("APK file not found")
        return path

    def upload(self, file: FileStorage | None, version, version_code, release_notes=None) -> ApkVersion:
        version = clean_text(version)
        if not version:
            raise ValidationError("version is required")
        version_code = coerce_int(version_code, "versionCode")
        if version_code is None or version_code <= 0:
            raise ValidationError("version code must be positive")
        if file is None or not file.filename:
            raise ValidationError("file is required")

        size = _stream_size(file)
        if size > self.max_file_size:
            raise ValidationError(f"file size exceeds maximum of {self.max_file_size} bytes")
        if not file.filename.lower().endswith(APK_EXTENSION):
            raise ValidationError("file must be an APK file")

        stem = secure_filename(version) or "apk"
        file_name = f"{stem}-{uuid.uuid4().hex[:8]}{APK_EXTENSION}"
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        path = self.upload_dir / file_name
        file.save(str(path))

        apk = ApkVersion(
            version=version,
            version_code=version_code,
            file_name=file_name,
            file_size=size,
            file_path=str(path),
            release_notes=clean_text(release_notes),
            is_active=True,
            uploaded_at=utcnow(),
        )
        try:
            self.apks.add(apk)
        except SQLAlchemyError as exc:
            path.unlink(missing_ok=True)
            if isinstance(exc, IntegrityError):
                raise ConflictError(f"APK version {version} already exists") from exc
            raise

        logger.info("APK %s (code %s) uploaded as %s, %s bytes", version, version_code, file_name, size)
        return apk

    def deactivate(self, apk_id: int) -> ApkVersion:
        apk = self.get_version(apk_id)
        apk.is_active = False
        self.apks.commit()
        logger.info("APK %s deactivated", apk.version)
        return apk

    def delete(self, apk_id: int) -> None:
        apk = self.get_version(apk_id)
        Path(apk.file_path).unlink(missing_ok=True)
        self.apks.delete(apk)
        logger.info("APK %s deleted", apk.version)
