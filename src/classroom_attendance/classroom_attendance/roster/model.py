from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import RosterImportOutcome
from ..courses.model import Student


@dataclass(frozen=True)
class RosterEntry:
    name: str
    external_id: Optional[str] = None


@dataclass(frozen=True)
class RosterImportResult:
    """Lets the caller tell "no students found" apart from "parser failed"."""

    outcome: RosterImportOutcome
    students: tuple[Student, ...] = ()
    error: Optional[str] = None

    @property
    def added_count(self) -> int:
        return len(self.students)
