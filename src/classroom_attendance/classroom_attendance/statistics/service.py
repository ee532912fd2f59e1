from __future__ import annotations

import unicodedata
from typing import Optional

from ..core.constants import AT_RISK_THRESHOLD_PERCENT
from ..courses.model import Course, Student
from .model import AttendanceCell, CourseStatistics, StudentSummary


def effective_presence(student: Student, day: str) -> bool:
    """Presence for display: an unrecorded date counts as present."""
    return student.attendance.get(day, True)


def recorded_dates(course: Course) -> tuple[str, ...]:
    """Sorted union of every date any student of the course has an entry for.

    `YYYY-MM-DD` strings sort chronologically, so plain sorting is enough.
    """
    dates: set[str] = set()
    for s in course.students:
        dates.update(s.attendance.keys())
    return tuple(sorted(dates))


def absence_dates(student: Student) -> tuple[str, ...]:
    return tuple(sorted(d for d, present in student.attendance.items() if present is False))


def absence_rate(absences_count: int, total_classes: int) -> float:
    if total_classes <= 0:
        return 0.0
    return absences_count / total_classes * 100


def name_sort_key(name: str) -> tuple[str, str]:
    """Locale-aware ordering: accents and case do not move a name around."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name


class StatisticsService:
    """Derived attendance figures. Pure: nothing here reads or writes storage."""

    def __init__(self, *, threshold: float = AT_RISK_THRESHOLD_PERCENT):
        self._threshold = float(threshold)

    @property
    def threshold(self) -> float:
        return self._threshold

    def is_at_risk(self, rate: float) -> bool:
        return rate >= self._threshold

    def summarize_course(self, course: Optional[Course]) -> Optional[CourseStatistics]:
        if course is None or not course.students:
            return None

        dates = recorded_dates(course)
        summary = []
        for s in course.students:
            absences = absence_dates(s)
            rate = absence_rate(len(absences), len(dates))
            summary.append(
                StudentSummary(
                    id=s.id,
                    name=s.name,
                    absences_count=len(absences),
                    absence_dates=absences,
                    absence_rate=rate,
                    is_at_risk=self.is_at_risk(rate),
                )
            )

        summary.sort(key=lambda x: name_sort_key(x.name))
        return CourseStatistics(recorded_dates=dates, student_summary=tuple(summary))

    def attendance_grid(self, course: Course) -> dict[str, list[AttendanceCell]]:
        dates = recorded_dates(course)
        return {
            s.id: [AttendanceCell(date=d, present=effective_presence(s, d), recorded=d in s.attendance) for d in dates]
            for s in course.students
        }
