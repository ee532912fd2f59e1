from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.classroom_attendance.classroom_attendance.courses.model import Course, Student


class InMemoryKeyValueStore:
    def __init__(self, data: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(data or {})
        self.writes: list[str] = []

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes.append(key)
        self.data[key] = value


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def fixed_today():
    return date(2024, 3, 4)


@pytest.fixture
def math_course():
    """Ana absent on 2024-01-11, Beto absent on 2024-01-10, nothing else recorded."""
    return Course(
        id="c1",
        name="Math 10",
        weeks=13,
        start_date="2024-01-08",
        students=(
            Student(id="s1", name="Ana", attendance={"2024-01-11": False}),
            Student(id="s2", name="Beto", attendance={"2024-01-10": False}),
        ),
    )
