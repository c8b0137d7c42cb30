from __future__ import annotations

from ..extensions import db
from kidspos.time_utils import to_utc_z, utcnow


class ApkVersion(db.Model):
    """
    Uploaded Android client build.

    version_code is the monotonically increasing integer the handheld app
    compares against; only active rows are offered as updates.
    """
    __tablename__ = "apk_versions"
    __table_args__ = (
        db.Index("idx_apk_versions_active_code", "isActive", "versionCode"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    version = db.Column(db.String(64), nullable=False, unique=True)
    version_code = db.Column("versionCode", db.Integer, nullable=False)
    file_name = db.Column("fileName", db.String(255), nullable=False)
    file_size = db.Column("fileSize", db.BigInteger, nullable=False)
    file_path = db.Column("filePath", db.String(1024), nullable=False)
    release_notes = db.Column("releaseNotes", db.Text, nullable=True)
    is_active = db.Column("isActive", db.Boolean, nullable=False, default=True)
    uploaded_at = db.Column("uploadedAt", db.DateTime, nullable=False, default=utcnow)

    created_at = db.Column("createdAt", db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column("updatedAt", db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<ApkVersion id={self.id} version={self.version!r} code={self.version_code} active={self.is_active}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "version": self.version,
            "versionCode": self.version_code,
            "fileName": self.file_name,
            "fileSize": self.file_size,
            "filePath": self.file_path,
            "releaseNotes": self.release_notes or "",
            "isActive": bool(self.is_active),
            "uploadedAt": to_utc_z(self.uploaded_at),
            "createdAt": to_utc_z(self.created_at),
            "updatedAt": to_utc_z(self.updated_at),
        }
