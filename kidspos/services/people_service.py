"""
Store and staff management.

Both entities are a name plus a generated external code. Deletes are hard
row removals guarded by the sale foreign keys: the database refuses the
DELETE while any sale points at the row and the error is surfaced as a
ReferencedError.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from ..models import DeleteStrategy, Staff, Store
from ..repositories import StaffRepository, StoreRepository
from ..validation import ConflictError, NotFoundError, ReferencedError, clean_text, require_text
from .identifiers import generate_external_id


class _NamedEntityService:
    delete_strategy = DeleteStrategy.GUARDED_HARD

    label: str
    code_prefix: str
    code_attr: str

    def __init__(self, repo):
        self.repo = repo

    def _list(self):
        return self.repo.find_all()

    def _get(self, pk: int):
        obj = self.repo.find_by_id(pk)
        if not obj:
            raise NotFoundError(f"{self.label.capitalize()} not found")
        return obj

    def _get_by_code(self, code: str):
        obj = self.repo.find_by_code(clean_text(code))
        if not obj:
            raise NotFoundError(f"{self.label.capitalize()} not found")
        return obj

    def _create(self, name, code: str | None = None):
        name = require_text(name, f"{self.label} name is required")
        code = clean_text(code) or generate_external_id(self.code_prefix)
        obj = self.repo.model(name=name, **{self.code_attr: code})
        try:
            return self.repo.add(obj)
        except IntegrityError as exc:
            raise ConflictError(f"{self.label} id {code} already exists") from exc

    def _rename(self, obj, name):
        obj.name = require_text(name, f"{self.label} name is required")
        self.repo.commit()
        return obj

    def _delete(self, obj) -> None:
        try:
            self.repo.delete(obj)
        except IntegrityError as exc:
            raise ReferencedError(f"{self.label} is referenced by existing sales") from exc


class StoreService(_NamedEntityService):
    label = "store"
    code_prefix = "STORE"
    code_attr = "store_id"

    def __init__(self, stores: StoreRepository):
        super().__init__(stores)

    def list_stores(self) -> list[Store]:
        return self._list()

    def get_store(self, store_id: int) -> Store:
        return self._get(store_id)

    def create_store(self, *, name, store_id: str | None = None) -> Store:
        return self._create(name, store_id)

    def update_store(self, store_id: int, *, name) -> Store:
        return self._rename(self._get(store_id), name)

    def delete_store(self, store_id: int) -> None:
        self._delete(self._get(store_id))


class StaffService(_NamedEntityService):
    label = "staff"
    code_prefix = "STAFF"
    code_attr = "staff_id"

    def __init__(self, staffs: StaffRepository):
        super().__init__(staffs)

    def list_staffs(self) -> list[Staff]:
        return self._list()

    def get_staff(self, staff_id: int) -> Staff:
        return self._get(staff_id)

    def find_by_barcode(self, barcode: str) -> Staff:
        return self._get_by_code(barcode)

    def create_staff(self, *, name, staff_id: str | None = None) -> Staff:
        return self._create(name, staff_id)

    def update_staff(self, staff_id: int, *, name) -> Staff:
        return self._rename(self._get(staff_id), name)

    def update_staff_by_barcode(self, barcode: str, *, name) -> Staff:
        return self._rename(self._get_by_code(barcode), name)

    def delete_staff(self, staff_id: int) -> None:
        self._delete(self._get(staff_id))

    def delete_staff_by_barcode(self, barcode: str) -> None:
        self._delete(self._get_by_code(barcode))
