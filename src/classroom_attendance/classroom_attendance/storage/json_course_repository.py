from __future__ import annotations

import json
import logging
from typing import Sequence

from ..core.constants import STORAGE_KEY
from ..courses.model import Course, courses_from_json_ready, courses_to_json_ready
from .kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonCourseRepository:
    """Course list persisted as a single JSON array under one storage key."""

    def __init__(self, store: KeyValueStore, *, key: str = STORAGE_KEY):
        self._store = store
        self._key = key

    def load_all(self) -> list[Course]:
        raw = self._store.get(self._key)
        if raw is None:
            return []

        try:
            items = json.loads(raw)
            if not isinstance(items, list):
                raise ValueError(f"expected a JSON array, got {type(items).__name__}")
            return courses_from_json_ready(items)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # Corrupt store falls back to an empty course list.
            logger.warning("Stored course list under %r is unreadable, starting empty: %s", self._key, e)
            return []

    def save_all(self, courses: Sequence[Course]) -> None:
        self._store.set(self._key, json.dumps(courses_to_json_ready(courses), ensure_ascii=False))
