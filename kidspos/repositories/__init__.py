# Overview: Data-access objects, one per entity, sharing one SQLAlchemy session.

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session, scoped_session

from .apk import ApkVersionRepository
from .base import BaseRepository
from .items import ItemRepository
from .people import StaffRepository, StoreRepository
from .sales import SaleRepository
from .settings import SettingRepository


@dataclass
class Repositories:
    items: ItemRepository
    stores: StoreRepository
    staffs: StaffRepository
    sales: SaleRepository
    settings: SettingRepository
    apks: ApkVersionRepository

    @classmethod
    def build(cls, session: Session | scoped_session) -> "Repositories":
        return cls(
            items=ItemRepository(session),
            stores=StoreRepository(session),
            staffs=StaffRepository(session),
            sales=SaleRepository(session),
            settings=SettingRepository(session),
            apks=ApkVersionRepository(session),
        )


__all__ = [
    "Repositories",
    "BaseRepository",
    "ItemRepository",
    "StoreRepository",
    "StaffRepository",
    "SaleRepository",
    "SettingRepository",
    "ApkVersionRepository",
]
