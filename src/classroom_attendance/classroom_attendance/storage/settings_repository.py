from __future__ import annotations

from ..core.constants import DEFAULT_TEACHER_NAME, SYNC_URL_KEY, TEACHER_NAME_KEY
from .kv_store import KeyValueStore


class KeyValueSettingsRepository:
    """Teacher name and sync URL, each stored under its own key."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        default_teacher_name: str = DEFAULT_TEACHER_NAME,
        teacher_name_key: str = TEACHER_NAME_KEY,
        sync_url_key: str = SYNC_URL_KEY,
    ):
        self._store = store
        self._default_teacher_name = default_teacher_name
        self._teacher_name_key = teacher_name_key
        self._sync_url_key = sync_url_key

    def get_teacher_name(self) -> str:
        return self._store.get(self._teacher_name_key) or self._default_teacher_name

    def set_teacher_name(self, value: str) -> None:
        self._store.set(self._teacher_name_key, value)

    def get_sync_url(self) -> str:
        return self._store.get(self._sync_url_key) or ""

    def set_sync_url(self, value: str) -> None:
        self._store.set(self._sync_url_key, value)
