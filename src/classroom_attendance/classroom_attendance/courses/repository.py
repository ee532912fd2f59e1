from __future__ import annotations

from typing import Protocol, Sequence

from .model import Course


class CourseRepository(Protocol):
    def load_all(self) -> list[Course]:
        """Return the persisted course list, or an empty list when unreadable."""

        raise NotImplementedError

    def save_all(self, courses: Sequence[Course]) -> None:
        raise NotImplementedError


class SettingsRepository(Protocol):
    def get_teacher_name(self) -> str:
        raise NotImplementedError

    def set_teacher_name(self, value: str) -> None:
        raise NotImplementedError

    def get_sync_url(self) -> str:
        raise NotImplementedError

    def set_sync_url(self, value: str) -> None:
        raise NotImplementedError
