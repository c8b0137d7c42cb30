from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from ..models import DeleteStrategy, Setting, SETTING_TYPES
from ..repositories import SettingRepository
from ..validation import ConflictError, NotFoundError, clean_text, require_text

DEFAULT_SETTINGS = (
    ("shopName", "KidsPOS Shop", "string", "Shop name"),
    ("receiptFooter", "Thank you!", "string", "Receipt footer message"),
    ("taxRate", "10", "number", "Tax rate in percentage"),
    ("currency", "JPY", "string", "Currency code"),
)


class SettingService:
    """
    Key/value settings.

    The type tag is stored as given and never used to coerce or check the
    value; unknown tags are recorded as "string".
    """
    delete_strategy = DeleteStrategy.HARD

    def __init__(self, settings: SettingRepository):
        self.settings = settings

    def list_settings(self) -> list[Setting]:
        return self.settings.find_all()

    def get_setting(self, key: str) -> Setting:
        key = require_text(key, "setting key is required")
        setting = self.settings.find_by_key(key)
        if not setting:
            raise NotFoundError(f"Setting not found: {key}")
        return setting

    def create_setting(self, *, key, value, type: str | None = None, description: str | None = None) -> Setting:
        key = require_text(key, "setting key is required")
        value = require_text(value, "setting value is required")
        type_tag = clean_text(type).lower()
        if type_tag not in SETTING_TYPES:
            type_tag = "string"

        setting = Setting(key=key, value=value, type=type_tag, description=clean_text(description) or None)
        try:
            return self.settings.add(setting)
        except IntegrityError as exc:
            raise ConflictError(f"setting {key} already exists") from exc

    def update_setting(self, key, value) -> Setting:
        key = require_text(key, "setting key is required")
        value = require_text(value, "setting value is required")
        setting = self.get_setting(key)
        setting.value = value
        self.settings.commit()
        return setting

    def delete_setting(self, key) -> None:
        setting = self.get_setting(key)
        self.settings.delete(setting)

    def ensure_defaults(self) -> int:
        """Insert missing default settings; existing keys are left untouched."""
        created = 0
        for key, value, type_tag, description in DEFAULT_SETTINGS:
            if self.settings.find_by_key(key):
                continue
            self.settings.add(
                Setting(key=key, value=value, type=type_tag, description=description),
                commit=False,
            )
            created += 1
        self.settings.commit()
        return created
