from __future__ import annotations

import threading
from typing import Callable, Iterable, Optional, Sequence

from .model import Course

CoursesListener = Callable[[Sequence[Course]], None]


class CourseStore:
    """In-memory owner of the course list and the active-course selection.

    Every change to the course list notifies subscribers with the full new
    list; persistence is one such subscriber. Selection changes are not
    broadcast because the selection is not persisted.
    """

    def __init__(self, courses: Iterable[Course] = ()):
        self._courses: tuple[Course, ...] = tuple(courses)
        self._active_course_id: Optional[str] = None
        self._listeners: list[CoursesListener] = []
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def subscribe(self, listener: CoursesListener) -> None:
        self._listeners.append(listener)

    @property
    def courses(self) -> tuple[Course, ...]:
        return self._courses

    @property
    def active_course_id(self) -> Optional[str]:
        return self._active_course_id

    @property
    def active_course(self) -> Optional[Course]:
        if self._active_course_id is None:
            return None
        return self.get(self._active_course_id)

    def select(self, course_id: Optional[str]) -> None:
        self._active_course_id = course_id

    def get(self, course_id: str) -> Optional[Course]:
        for c in self._courses:
            if c.id == course_id:
                return c
        return None

    def replace_all(self, courses: Iterable[Course]) -> None:
        with self._lock:
            self._courses = tuple(courses)
            if self._active_course_id is not None and self.get(self._active_course_id) is None:
                self._active_course_id = None
            self._notify()

    def append(self, course: Course) -> None:
        with self._lock:
            self._courses = self._courses + (course,)
            self._notify()

    def update(self, course: Course) -> None:
        with self._lock:
            self._courses = tuple(course if c.id == course.id else c for c in self._courses)
            self._notify()

    def remove(self, course_id: str) -> bool:
        with self._lock:
            remaining = tuple(c for c in self._courses if c.id != course_id)
            if len(remaining) == len(self._courses):
                return False
            self._courses = remaining
            if self._active_course_id == course_id:
                self._active_course_id = None
            self._notify()
            return True

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._courses)
