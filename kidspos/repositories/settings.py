from __future__ import annotations

from ..models import Setting
from .base import BaseRepository


class SettingRepository(BaseRepository[Setting]):
    model = Setting

    def find_all(self) -> list[Setting]:
        return self.query().order_by(Setting.key.asc()).all()

    def find_by_key(self, key: str) -> Setting | None:
        return self.query().filter(Setting.key == key).first()
