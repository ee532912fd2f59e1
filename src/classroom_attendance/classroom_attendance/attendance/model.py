from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceEvent:
    """Emitted after a toggle is committed and persisted."""

    student_name: str
    date: str
    present: bool
    course_name: str
