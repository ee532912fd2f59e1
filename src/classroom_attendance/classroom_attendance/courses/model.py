from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on a course roster.

    `attendance` maps `YYYY-MM-DD` to present (True) / absent (False). A date
    with no key has not been recorded for this student.
    """

    id: str
    name: str
    attendance: dict[str, bool] = field(default_factory=dict)
    grades: dict[str, float] = field(default_factory=dict)
    external_id: Optional[str] = None

    def with_attendance(self, day: str, present: bool) -> "Student":
        attendance = dict(self.attendance)
        attendance[day] = present
        return replace(self, attendance=attendance)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.external_id is not None:
            data["externalId"] = self.external_id
        data["attendance"] = dict(self.attendance)
        data["grades"] = dict(self.grades)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            attendance=_attendance_from_json(data.get("attendance") or {}),
            grades=dict(data.get("grades") or {}),
            external_id=data.get("externalId"),
        )


@dataclass(frozen=True)
class Course:
    """Domain entity: a roster group tracked over an academic term."""

    id: str
    name: str
    weeks: int
    start_date: str
    description: str = ""
    students: tuple[Student, ...] = ()
    subjects: tuple[str, ...] = ()

    def find_student(self, student_id: str) -> Optional[Student]:
        for s in self.students:
            if s.id == student_id:
                return s
        return None

    def with_student(self, student: Student) -> "Course":
        """Replace the student with the same id, keeping roster order."""
        students = tuple(student if s.id == student.id else s for s in self.students)
        return replace(self, students=students)

    def with_appended(self, *students: Student) -> "Course":
        return replace(self, students=self.students + tuple(students))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "weeks": self.weeks,
            "startDate": self.start_date,
            "students": [s.to_dict() for s in self.students],
            "subjects": list(self.subjects),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Course":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            weeks=int(data.get("weeks") or 0),
            start_date=str(data.get("startDate") or ""),
            students=tuple(Student.from_dict(s) for s in (data.get("students") or [])),
            subjects=tuple(str(s) for s in (data.get("subjects") or [])),
        )


def courses_to_json_ready(courses) -> list[dict[str, Any]]:
    return [c.to_dict() for c in courses]


def courses_from_json_ready(items) -> list[Course]:
    return [Course.from_dict(item) for item in items]


def _attendance_from_json(raw: Mapping[str, Any]) -> dict[str, bool]:
    # Attendance marks are JSON booleans only.
    attendance = {}
    for day, present in raw.items():
        if not isinstance(present, bool):
            raise ValueError(f"attendance for {day!r} must be true or false, got {present!r}")
        attendance[str(day)] = present
    return attendance
