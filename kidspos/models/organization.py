from __future__ import annotations

from ..extensions import db
from kidspos.time_utils import to_utc_z, utcnow


class Store(db.Model):
    __tablename__ = "store"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    store_id = db.Column("storeId", db.String(64), nullable=False, unique=True)
    name = db.Column(db.String(255), nullable=False)

    created_at = db.Column("createdAt", db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column("updatedAt", db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Store id={self.id} storeId={self.store_id!r} name={self.name!r}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "storeId": self.store_id,
            "name": self.name,
            "createdAt": to_utc_z(self.created_at),
            "updatedAt": to_utc_z(self.updated_at),
        }


class Staff(db.Model):
    """Cashier or helper; staff_id doubles as the badge barcode."""
    __tablename__ = "staff"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    staff_id = db.Column("staffId", db.String(64), nullable=False, unique=True)
    name = db.Column(db.String(255), nullable=False)

    created_at = db.Column("createdAt", db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column("updatedAt", db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Staff id={self.id} staffId={self.staff_id!r} name={self.name!r}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "staffId": self.staff_id,
            "name": self.name,
            "createdAt": to_utc_z(self.created_at),
            "updatedAt": to_utc_z(self.updated_at),
        }
