from .common import DeleteStrategy
from .catalog import Item
from .organization import Store, Staff
from .sales import Sale, SaleDetail
from .settings import Setting, SETTING_TYPES
from .apk import ApkVersion

__all__ = [
    'DeleteStrategy',
    'Item',
    'Store', 'Staff',
    'Sale', 'SaleDetail',
    'Setting', 'SETTING_TYPES',
    'ApkVersion',
]
