from __future__ import annotations

import logging

from ..attendance.service import AttendanceService
from ..core.enums import RosterImportOutcome
from ..core.exceptions import NotFoundError, RosterParseError
from ..courses.store import CourseStore
from .model import RosterImportResult
from .parser import RosterParser

logger = logging.getLogger(__name__)


class RosterImportService:
    def __init__(
        self,
        parser: RosterParser,
        attendance: AttendanceService,
        store: CourseStore,
        *,
        keep_external_ids: bool = False,
    ):
        self._parser = parser
        self._attendance = attendance
        self._store = store
        self._keep_external_ids = bool(keep_external_ids)

    def import_roster(self, course_id: str, data: bytes, media_type: str) -> RosterImportResult:
        """Append one student per parsed name to the end of the roster.

        Names are not deduplicated against the existing roster.
        """
        if not self._store.get(course_id):
            raise NotFoundError("El grupo no existe")

        try:
            entries = self._parser.parse_roster(data, media_type)
        except RosterParseError as e:
            return RosterImportResult(outcome=RosterImportOutcome.FAILED, error=str(e))

        external_ids = [e.external_id if self._keep_external_ids else None for e in entries]
        added = self._attendance.append_students(course_id, [e.name for e in entries], external_ids=external_ids)
        if not added:
            return RosterImportResult(outcome=RosterImportOutcome.EMPTY)

        logger.info("Roster import added %d students to course %s", len(added), course_id)
        return RosterImportResult(outcome=RosterImportOutcome.IMPORTED, students=tuple(added))
