from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from ..models import DeleteStrategy, Item
from ..repositories import ItemRepository
from ..validation import ConflictError, NotFoundError, ValidationError, clean_text, coerce_int
from .identifiers import generate_external_id

ITEM_ID_PREFIX = "ITEM"


def validate_item_fields(name: str, price: int | None, stock: int | None) -> None:
    if not name:
        raise ValidationError("item name is required")
    if price is None or price < 0:
        raise ValidationError("item price must be non-negative")
    if stock is None or stock < 0:
        raise ValidationError("item stock must be non-negative")


class ItemService:
    delete_strategy = DeleteStrategy.SOFT

    def __init__(self, items: ItemRepository):
        self.items = items

    def list_items(self) -> list[Item]:
        return self.items.find_all()

    def get_item(self, item_id: int) -> Item:
        item = self.items.find_by_id(item_id)
        if not item:
            raise NotFoundError("Item not found")
        return item

    def find_by_barcode(self, code: str) -> Item:
        item = self.items.find_by_barcode(clean_text(code))
        if not item:
            raise NotFoundError("Item not found")
        return item

    def create_item(self, *, name, price=None, stock=None, item_id: str | None = None) -> Item:
        name = clean_text(name)
        price = coerce_int(price, "price", default=0)
        stock = coerce_int(stock, "stock", default=0)
        validate_item_fields(name, price, stock)

        item = Item(
            item_id=clean_text(item_id) or generate_external_id(ITEM_ID_PREFIX),
            name=name,
            price=price,
            stock=stock,
        )
        try:
            return self.items.add(item)
        except IntegrityError as exc:
            raise ConflictError(f"item id {item.item_id} already exists") from exc

    def update_item(self, item_id: int, *, name, price=None, stock=None) -> Item:
        """Full overwrite of name/price/stock; the external itemId never changes."""
        name = clean_text(name)
        price = coerce_int(price, "price", default=0)
        stock = coerce_int(stock, "stock", default=0)
        validate_item_fields(name, price, stock)

        item = self.get_item(item_id)
        item.name = name
        item.price = price
        item.stock = stock
        self.items.commit()
        return item

    def patch_item(self, item_id: int, changes: dict) -> Item:
        item = self.get_item(item_id)
        name = clean_text(changes["name"]) if "name" in changes else item.name
        price = coerce_int(changes["price"], "price") if "price" in changes else item.price
        stock = coerce_int(changes["stock"], "stock") if "stock" in changes else item.stock
        validate_item_fields(name, price, stock)

        item.name = name
        item.price = price
        item.stock = stock
        self.items.commit()
        return item

    def delete_item(self, item_id: int) -> None:
        item = self.get_item(item_id)
        self.items.soft_delete(item)
