from __future__ import annotations

from ..extensions import db
from kidspos.time_utils import to_utc_z, utcnow


class Sale(db.Model):
    """
    Completed sale. Write-once: there is no update, void or delete path.

    store/staff relationships are one-directional: deleting a
    referenced store or staff row fails on the foreign key and the ORM
    never nulls out sale.storeId.
    """
    __tablename__ = "sale"
    __table_args__ = (
        db.Index("idx_sale_storeId", "storeId"),
        db.Index("idx_sale_staffId", "staffId"),
        db.Index("idx_sale_saleAt", "saleAt"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    store_id = db.Column("storeId", db.Integer, db.ForeignKey("store.id"), nullable=False)
    staff_id = db.Column("staffId", db.Integer, db.ForeignKey("staff.id"), nullable=False)
    total_price = db.Column("totalPrice", db.Integer, nullable=False)
    deposit = db.Column(db.Integer, nullable=False)
    sale_at = db.Column("saleAt", db.DateTime, nullable=False)

    created_at = db.Column("createdAt", db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column("updatedAt", db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    store = db.relationship("Store")
    staff = db.relationship("Staff")
    details = db.relationship(
        "SaleDetail",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleDetail.id",
    )

    def __repr__(self) -> str:
        return f"<Sale id={self.id} storeId={self.store_id} staffId={self.staff_id} total={self.total_price}>"

    def to_dict(self, *, include_details: bool = True) -> dict:
        data = {
            "id": self.id,
            "storeId": self.store_id,
            "staffId": self.staff_id,
            "totalPrice": self.total_price,
            "deposit": self.deposit,
            "saleAt": to_utc_z(self.sale_at),
            "createdAt": to_utc_z(self.created_at),
            "updatedAt": to_utc_z(self.updated_at),
        }
        if self.store is not None:
            data["store"] = self.store.to_dict()
        if self.staff is not None:
            data["staff"] = self.staff.to_dict()
        if include_details:
            data["details"] = [detail.to_dict() for detail in self.details]
        return data


class SaleDetail(db.Model):
    """One sale line: item, quantity and the unit price charged."""
    __tablename__ = "sale_detail"
    __table_args__ = (
        db.Index("idx_sale_detail_saleId", "saleId"),
        db.Index("idx_sale_detail_itemId", "itemId"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    sale_id = db.Column("saleId", db.Integer, db.ForeignKey("sale.id", ondelete="CASCADE"), nullable=False)
    item_id = db.Column("itemId", db.Integer, db.ForeignKey("item.id"), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    price = db.Column(db.Integer, nullable=False)

    created_at = db.Column("createdAt", db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column("updatedAt", db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    sale = db.relationship("Sale", back_populates="details")
    item = db.relationship("Item")

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "saleId": self.sale_id,
            "itemId": self.item_id,
            "quantity": self.quantity,
            "price": self.price,
            "createdAt": to_utc_z(self.created_at),
            "updatedAt": to_utc_z(self.updated_at),
        }
        if self.item is not None:
            data["item"] = self.item.to_dict()
        return data
