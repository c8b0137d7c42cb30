# Overview: Service layer; built once per app and handed to the route layer.

from __future__ import annotations

from dataclasses import dataclass

from flask import current_app

from ..repositories import Repositories
from .apk_service import ApkVersionService
from .item_service import ItemService
from .people_service import StaffService, StoreService
from .sales_service import SaleService
from .settings_service import SettingService

EXTENSION_KEY = "kidspos"


@dataclass
class ServiceRegistry:
    items: ItemService
    stores: StoreService
    staffs: StaffService
    sales: SaleService
    settings: SettingService
    apks: ApkVersionService

    @classmethod
    def build(cls, repos: Repositories, *, apk_upload_dir: str, apk_max_file_size: int) -> "ServiceRegistry":
        return cls(
            items=ItemService(repos.items),
            stores=StoreService(repos.stores),
            staffs=StaffService(repos.staffs),
            sales=SaleService(repos.sales, repos.items, repos.stores, repos.staffs),
            settings=SettingService(repos.settings),
            apks=ApkVersionService(repos.apks, apk_upload_dir, apk_max_file_size),
        )


def get_services() -> ServiceRegistry:
    return current_app.extensions[EXTENSION_KEY]
