"""
Sales Service - one-shot sale creation

A sale is written once: header, detail lines and stock decrements commit
together or not at all. There is no draft, void or edit path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable

from ..models import Item, Sale, SaleDetail
from ..repositories import ItemRepository, SaleRepository, StaffRepository, StoreRepository
from ..validation import MAX_INT, NotFoundError, ValidationError, check_int_range, coerce_int
from kidspos.time_utils import utcnow

logger = logging.getLogger(__name__)


class SaleError(ValidationError):
    """Raised for sale validation errors."""
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class ItemNotFoundError(SaleError):
    def __init__(self, item_id: Any):
        super().__init__(f"item not found: {item_id}", details={"itemId": item_id})


class InsufficientStockError(SaleError):
    def __init__(self, item: Item, requested: int):
        super().__init__(
            f"insufficient stock for item: {item.name}",
            details={
                "itemId": item.id,
                "name": item.name,
                "requestedQuantity": requested,
                "stock": item.stock,
            },
        )


@dataclass(frozen=True)
class SaleLineRequest:
    item_id: int
    quantity: int
    price: int | None = None

    @classmethod
    def from_mapping(cls, data: Any) -> "SaleLineRequest":
        if not isinstance(data, dict):
            raise SaleError("each sale detail must be an object")
        return cls(
            item_id=coerce_int(data.get("itemId"), "itemId", default=0),
            quantity=coerce_int(data.get("quantity"), "quantity", default=0),
            price=coerce_int(data.get("price"), "price"),
        )


class SaleService:
    def __init__(
        self,
        sales: SaleRepository,
        items: ItemRepository,
        stores: StoreRepository,
        staffs: StaffRepository,
    ):
        self.sales = sales
        self.items = items
        self.stores = stores
        self.staffs = staffs

    def list_sales(self) -> list[Sale]:
        return self.sales.find_all()

    def get_sale(self, sale_id: int) -> Sale:
        sale = self.sales.find_by_id(sale_id)
        if not sale:
            raise NotFoundError("Sale not found")
        return sale

    def sales_report(self, start: datetime | None = None, end: datetime | None = None) -> dict:
        """Sales with start <= saleAt < end, plus count and amount totals."""
        sales = self.sales.find_between(start, end)
        return {
            "sales": sales,
            "totalSales": len(sales),
            "totalAmount": sum(sale.total_price for sale in sales),
        }

    def _validate_header(self, store_id: int, staff_id: int, lines: list) -> None:
        if store_id <= 0:
            raise SaleError("store is required")
        if staff_id <= 0:
            raise SaleError("staff is required")
        if not lines:
            raise SaleError("sale must have at least one item")
        if not self.stores.find_by_id(store_id):
            raise SaleError(f"store not found: {store_id}", details={"storeId": store_id})
        if not self.staffs.find_by_id(staff_id):
            raise SaleError(f"staff not found: {staff_id}", details={"staffId": staff_id})

    def create_sale(
        self,
        *,
        store_id: Any,
        staff_id: Any,
        lines: Iterable[SaleLineRequest],
        deposit: Any = None,
        sale_at: datetime | None = None,
    ) -> Sale:
        """
        Validate, price and persist a sale.

        Line prices left unset (or 0) take the item's current price.
        Deposit left unset (or 0) equals the total. Every check runs before
        the first write; the write phase is a single transaction whose stock
        decrements only succeed while stock covers the quantity.
        """
        if sale_at is None:
            sale_at = utcnow()

        store_id = coerce_int(store_id, "storeId", default=0)
        staff_id = coerce_int(staff_id, "staffId", default=0)
        deposit = coerce_int(deposit, "deposit", default=0)
        lines = list(lines)

        self._validate_header(store_id, staff_id, lines)
        if deposit < 0:
            raise SaleError("deposit must be non-negative")

        items = self.items.find_many(line.item_id for line in lines)
        requested: dict[int, int] = {}
        details: list[SaleDetail] = []
        total_price = 0

        for line in lines:
            if line.quantity <= 0:
                raise SaleError("quantity must be positive", details={"itemId": line.item_id})
            check_int_range(line.quantity, "quantity")
            if line.price is not None:
                check_int_range(line.price, "price")
            item = items.get(line.item_id)
            if item is None:
                raise ItemNotFoundError(line.item_id)

            requested[item.id] = requested.get(item.id, 0) + line.quantity
            if item.stock < requested[item.id]:
                raise InsufficientStockError(item, requested[item.id])

            price = line.price if line.price else item.price
            if price < 0:
                raise SaleError("price must be non-negative", details={"itemId": item.id})

            total_price += price * line.quantity
            if total_price > MAX_INT:
                raise SaleError(f"sale total exceeds maximum of {MAX_INT}", details={"itemId": item.id})
            details.append(SaleDetail(item_id=item.id, quantity=line.quantity, price=price))

        sale = Sale(
            store_id=store_id,
            staff_id=staff_id,
            total_price=total_price,
            deposit=deposit or total_price,
            sale_at=sale_at,
        )
        sale.details.extend(details)

        try:
            self.sales.add(sale, commit=False)
            for item_id, quantity in requested.items():
                if not self.items.decrement_stock(item_id, quantity):
                    # Stock moved between the read above and this write
                    raise InsufficientStockError(items[item_id], quantity)
            self.sales.commit()
        except Exception:
            self.sales.rollback()
            raise

        logger.info(
            "Sale %s created: store=%s staff=%s lines=%s total=%s",
            sale.id, store_id, staff_id, len(details), total_price,
        )
        return sale
