from __future__ import annotations

from sqlalchemy import update

from ..models import Item
from kidspos.time_utils import utcnow
from .base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """Every read hides soft-deleted rows."""
    model = Item

    def query(self):
        return self.session.query(Item).filter(Item.is_deleted.is_(False))

    def find_all(self) -> list[Item]:
        return self.query().order_by(Item.id.desc()).all()

    def find_by_barcode(self, code: str) -> Item | None:
        return self.query().filter(Item.item_id == code).first()

    def find_many(self, ids) -> dict[int, Item]:
        ids = list(ids)
        if not ids:
            return {}
        return {item.id: item for item in self.query().filter(Item.id.in_(ids)).all()}

    def soft_delete(self, item: Item, *, commit: bool = True) -> None:
        item.is_deleted = True
        if commit:
            self.commit()

    def decrement_stock(self, pk: int, quantity: int) -> bool:
        """
        Conditional decrement inside the caller's transaction.

        Returns False when the row would go negative (or is gone), in which
        case nothing was changed.
        """
        stmt = (
            update(Item)
            .where(Item.id == pk, Item.is_deleted.is_(False), Item.stock >= quantity)
            .values({Item.stock: Item.stock - quantity, Item.updated_at: utcnow()})
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        return result.rowcount == 1
