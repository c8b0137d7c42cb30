from __future__ import annotations

from ..extensions import db
from kidspos.time_utils import to_utc_z, utcnow


class Item(db.Model):
    """
    Sellable product.

    item_id is the external code printed on labels; barcode scans match
    against it (there is no separate barcode column).
    """
    __tablename__ = "item"
    __table_args__ = (
        db.Index("idx_item_isDeleted", "isDeleted"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    item_id = db.Column("itemId", db.String(64), nullable=False, unique=True, index=True)
    name = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Integer, nullable=False, default=0)
    stock = db.Column(db.Integer, nullable=False, default=0)
    is_deleted = db.Column("isDeleted", db.Boolean, nullable=False, default=False)

    created_at = db.Column("createdAt", db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column("updatedAt", db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Item id={self.id} itemId={self.item_id!r} name={self.name!r} stock={self.stock}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "itemId": self.item_id,
            "name": self.name,
            "price": self.price,
            "stock": self.stock,
            "isDeleted": bool(self.is_deleted),
            "createdAt": to_utc_z(self.created_at),
            "updatedAt": to_utc_z(self.updated_at),
        }
