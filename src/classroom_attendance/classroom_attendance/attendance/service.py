from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import today_iso
from ..common.ids import new_id
from ..common.validators import is_blank, require_iso_date, require_positive_int
from ..core.constants import DEFAULT_COURSE_WEEKS
from ..core.exceptions import NotFoundError
from ..courses.model import Course, Student
from ..courses.store import CourseStore
from ..statistics.service import effective_presence
from .model import AttendanceEvent

logger = logging.getLogger(__name__)

AttendanceListener = Callable[[AttendanceEvent], None]


class AttendanceService:
    """The only path through which courses, rosters and attendance change."""

    def __init__(self, store: CourseStore):
        self._store = store
        self._listeners: list[AttendanceListener] = []

    def subscribe(self, listener: AttendanceListener) -> None:
        self._listeners.append(listener)

    def _require_course(self, course_id: str) -> Course:
        course = self._store.get(course_id)
        if not course:
            raise NotFoundError("El grupo no existe")
        return course

    def toggle_attendance(self, course_id: str, student_id: str, day: str) -> AttendanceEvent:
        require_iso_date(day, "Fecha")

        with self._store.lock:
            course = self._require_course(course_id)
            student = course.find_student(student_id)
            if not student:
                raise NotFoundError("El estudiante no existe")

            present = not effective_presence(student, day)
            self._store.update(course.with_student(student.with_attendance(day, present)))

        event = AttendanceEvent(student_name=student.name, date=day, present=present, course_name=course.name)
        for listener in list(self._listeners):
            listener(event)
        return event

    def add_course(
        self,
        name: str,
        weeks: int = DEFAULT_COURSE_WEEKS,
        start_date: Optional[str] = None,
    ) -> Optional[Course]:
        if is_blank(name):
            return None

        course = Course(
            id=new_id(),
            name=name,
            weeks=require_positive_int(weeks, "Semanas"),
            start_date=require_iso_date(start_date or today_iso(), "Fecha de inicio"),
        )
        with self._store.lock:
            self._store.append(course)
            self._store.select(course.id)
        logger.info("Course %s created (%s)", course.id, course.name)
        return course

    def add_student(self, course_id: Optional[str], name: str) -> Optional[Student]:
        course_id = course_id or self._store.active_course_id
        if is_blank(name) or not course_id:
            return None

        added = self.append_students(course_id, [name])
        return added[0] if added else None

    def append_students(
        self,
        course_id: str,
        names: Iterable[str],
        *,
        external_ids: Optional[Iterable[Optional[str]]] = None,
    ) -> list[Student]:
        names = list(names)
        ids = list(external_ids) if external_ids is not None else [None] * len(names)

        new_students = [
            Student(id=new_id(), name=name, external_id=ext)
            for name, ext in zip(names, ids)
            if not is_blank(name)
        ]
        if not new_students:
            return []

        with self._store.lock:
            course = self._require_course(course_id)
            self._store.update(course.with_appended(*new_students))
        return new_students

    def delete_course(self, course_id: str) -> bool:
        """Remove a course and its roster for good. The caller confirms first."""
        removed = self._store.remove(course_id)
        if removed:
            logger.info("Course %s deleted", course_id)
        return removed

    def select_course(self, course_id: Optional[str]) -> None:
        if course_id is not None:
            self._require_course(course_id)
        self._store.select(course_id)
