from __future__ import annotations

from ..models import Staff, Store
from .base import BaseRepository


class StoreRepository(BaseRepository[Store]):
    model = Store

    def find_all(self) -> list[Store]:
        return self.query().order_by(Store.id.desc()).all()

    def find_by_code(self, code: str) -> Store | None:
        return self.query().filter(Store.store_id == code).first()


class StaffRepository(BaseRepository[Staff]):
    model = Staff

    def find_all(self) -> list[Staff]:
        return self.query().order_by(Staff.id.desc()).all()

    def find_by_code(self, code: str) -> Staff | None:
        return self.query().filter(Staff.staff_id == code).first()
