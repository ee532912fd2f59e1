from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..courses.repository import SettingsRepository


@dataclass(frozen=True)
class TeacherSettings:
    teacher_name: str
    sync_url: str


class SettingsService:
    """Teacher name and sync URL. Each change writes only its own key."""

    def __init__(self, repository: SettingsRepository):
        self._repository = repository
        self._teacher_name = repository.get_teacher_name()
        self._sync_url = repository.get_sync_url()

    @property
    def teacher_name(self) -> str:
        return self._teacher_name

    @property
    def sync_url(self) -> str:
        return self._sync_url

    def current(self) -> TeacherSettings:
        return TeacherSettings(teacher_name=self._teacher_name, sync_url=self._sync_url)

    def update(self, *, teacher_name: Optional[str] = None, sync_url: Optional[str] = None) -> TeacherSettings:
        if teacher_name is not None and teacher_name != self._teacher_name:
            self._teacher_name = teacher_name
            self._repository.set_teacher_name(teacher_name)
        if sync_url is not None and sync_url != self._sync_url:
            self._sync_url = sync_url
            self._repository.set_sync_url(sync_url)
        return self.current()
