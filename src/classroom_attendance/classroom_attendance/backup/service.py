from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.constants import DATE_FORMAT, DEFAULT_BACKUP_IDENTIFIER
from ..core.exceptions import BackupFormatError
from ..courses.model import Course, courses_from_json_ready, courses_to_json_ready
from ..courses.store import CourseStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackupFile:
    filename: str
    content: bytes
    mimetype: str = "application/json"


class BackupService:
    """Portable export/import of the whole course list.

    Import is a full overwrite, never a merge.
    """

    def __init__(self, store: CourseStore, *, identifier: str = DEFAULT_BACKUP_IDENTIFIER):
        self._store = store
        self._identifier = identifier

    def backup_filename(self, today: Optional[date] = None) -> str:
        today = today or today_local()
        return f"BACKUP_{self._identifier}_{today.strftime(DATE_FORMAT)}.json"

    def export_backup(self, *, today: Optional[date] = None) -> BackupFile:
        payload = json.dumps(courses_to_json_ready(self._store.courses), ensure_ascii=False)
        return BackupFile(filename=self.backup_filename(today), content=payload.encode("utf-8"))

    def import_backup(self, raw: bytes | str) -> list[Course]:
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8-sig")
            except UnicodeDecodeError:
                logger.info("Backup rejected: not UTF-8 text")
                raise BackupFormatError("Error al parsear el archivo.") from None

        try:
            items = json.loads(raw)
        except ValueError:
            logger.info("Backup rejected: invalid JSON")
            raise BackupFormatError("Error al parsear el archivo.") from None

        if not isinstance(items, list):
            logger.info("Backup rejected: top-level value is %s, not an array", type(items).__name__)
            raise BackupFormatError("El archivo no contiene una lista de grupos.")

        try:
            courses = courses_from_json_ready(items)
        except (KeyError, TypeError, ValueError, AttributeError):
            logger.info("Backup rejected: course entries are malformed")
            raise BackupFormatError("El archivo contiene grupos con un formato inválido.") from None

        duplicate = _first_duplicate_id(courses)
        if duplicate is not None:
            logger.info("Backup rejected: duplicate id %r", duplicate)
            raise BackupFormatError("El archivo contiene identificadores repetidos.")

        self._store.replace_all(courses)
        logger.info("Backup restored (%d courses)", len(courses))
        return courses


def _first_duplicate_id(courses: list[Course]) -> Optional[str]:
    """First course id, or student id within a course, that appears twice."""
    course_ids: set[str] = set()
    for course in courses:
        if course.id in course_ids:
            return course.id
        course_ids.add(course.id)
        student_ids: set[str] = set()
        for student in course.students:
            if student.id in student_ids:
                return student.id
            student_ids.add(student.id)
    return None
