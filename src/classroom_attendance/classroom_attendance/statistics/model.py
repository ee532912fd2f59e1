from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentSummary:
    """Read-model: absence figures for one student of a course."""

    id: str
    name: str
    absences_count: int
    absence_dates: tuple[str, ...]
    absence_rate: float
    is_at_risk: bool


@dataclass(frozen=True)
class CourseStatistics:
    recorded_dates: tuple[str, ...]
    student_summary: tuple[StudentSummary, ...]

    @property
    def total_classes(self) -> int:
        return len(self.recorded_dates)

    @property
    def at_risk_count(self) -> int:
        return sum(1 for s in self.student_summary if s.is_at_risk)

    def for_student(self, student_id: str) -> StudentSummary | None:
        for s in self.student_summary:
            if s.id == student_id:
                return s
        return None


@dataclass(frozen=True)
class AttendanceCell:
    """One cell of the control matrix (student x recorded date)."""

    date: str
    present: bool
    recorded: bool
