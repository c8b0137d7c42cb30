from __future__ import annotations

from ..extensions import db
from kidspos.time_utils import to_utc_z, utcnow

SETTING_TYPES = ("string", "number", "boolean")


class Setting(db.Model):
    """
    Key/value configuration row.

    `type` is a descriptive tag for editors; values are stored and returned
    as text and never coerced or checked against it.
    """
    __tablename__ = "setting"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(128), nullable=False, unique=True)
    value = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(16), nullable=False, default="string")
    description = db.Column(db.Text, nullable=True)

    created_at = db.Column("createdAt", db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column("updatedAt", db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Setting key={self.key!r} type={self.type!r}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "key": self.key,
            "value": self.value,
            "type": self.type,
            "description": self.description,
            "createdAt": to_utc_z(self.created_at),
            "updatedAt": to_utc_z(self.updated_at),
        }
