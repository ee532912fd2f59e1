from __future__ import annotations

from .repository import CourseRepository
from .store import CourseStore


def load_store(repository: CourseRepository) -> CourseStore:
    """Build the store from persisted data and persist every later change.

    The whole list is re-serialized on each change; there is no partial write.
    """
    store = CourseStore(repository.load_all())
    store.subscribe(repository.save_all)
    return store
