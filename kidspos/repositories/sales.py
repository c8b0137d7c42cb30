from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import selectinload

from ..models import Sale, SaleDetail
from .base import BaseRepository


class SaleRepository(BaseRepository[Sale]):
    model = Sale

    def query(self):
        return self.session.query(Sale).options(
            selectinload(Sale.store),
            selectinload(Sale.staff),
            selectinload(Sale.details).selectinload(SaleDetail.item),
        )

    def find_all(self) -> list[Sale]:
        return self.query().order_by(Sale.id.desc()).all()

    def find_between(self, start: datetime | None, end: datetime | None) -> list[Sale]:
        q = self.query()
        if start is not None:
            q = q.filter(Sale.sale_at >= start)
        if end is not None:
            q = q.filter(Sale.sale_at < end)
        return q.order_by(Sale.sale_at.desc(), Sale.id.desc()).all()

    def count_details(self, sale_id: int | None = None) -> int:
        q = self.session.query(SaleDetail)
        if sale_id is not None:
            q = q.filter(SaleDetail.sale_id == sale_id)
        return q.count()
