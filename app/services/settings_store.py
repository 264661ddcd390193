"""Per-user preferences stored on users/{uid} under `notifications` and `privacy`."""
from __future__ import annotations

from typing import Type, TypeVar

from pydantic import BaseModel

from app.core.config import settings
from app.core.firebase import get_db
from app.models.settings import NotificationPreferences, PrivacyPreferences

M = TypeVar("M", bound=BaseModel)


class SettingsStore:
    def __init__(self, db, collection: str | None = None):
        self.db = db
        self.collection = collection or settings.USERS_COLLECTION

    def _user_ref(self, uid: str):
        return self.db.collection(self.collection).document(uid)

    def _read(self, uid: str, key: str, model: Type[M]) -> M:
        doc = self._user_ref(uid).get()
        data = (doc.to_dict() or {}) if doc.exists else {}
        return model.model_validate(data.get(key) or {})

    def _merge(self, uid: str, key: str, model: Type[M], changes: dict) -> M:
        current = self._read(uid, key, model)
        merged = current.model_copy(update=changes)
        self._user_ref(uid).set({key: merged.model_dump(by_alias=True)}, merge=True)
        return merged

    def get_notifications(self, uid: str) -> NotificationPreferences:
        return self._read(uid, "notifications", NotificationPreferences)

    def update_notifications(self, uid: str, changes: dict) -> NotificationPreferences:
        return self._merge(uid, "notifications", NotificationPreferences, changes)

    def get_privacy(self, uid: str) -> PrivacyPreferences:
        return self._read(uid, "privacy", PrivacyPreferences)

    def update_privacy(self, uid: str, changes: dict) -> PrivacyPreferences:
        return self._merge(uid, "privacy", PrivacyPreferences, changes)


def get_settings_store() -> SettingsStore:
    return SettingsStore(get_db())
