from __future__ import annotations

from ..models import ApkVersion
from .base import BaseRepository


class ApkVersionRepository(BaseRepository[ApkVersion]):
    model = ApkVersion

    def _active(self):
        return self.query().filter(ApkVersion.is_active.is_(True))

    def find_all_active(self) -> list[ApkVersion]:
        return self._active().order_by(ApkVersion.version_code.desc(), ApkVersion.id.desc()).all()

    def find_latest(self) -> ApkVersion | None:
        return self._active().order_by(ApkVersion.version_code.desc(), ApkVersion.id.desc()).first()

    def find_next_after(self, version_code: int) -> ApkVersion | None:
        """Active version with the smallest code above `version_code`."""
        return (
            self._active()
            .filter(ApkVersion.version_code > version_code)
            .order_by(ApkVersion.version_code.asc(), ApkVersion.uploaded_at.desc(), ApkVersion.id.desc())
            .first()
        )
