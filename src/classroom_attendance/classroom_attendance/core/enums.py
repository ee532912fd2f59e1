from __future__ import annotations

from enum import Enum


class SyncStatus(str, Enum):
    """Outbound sync indicator shown to the teacher."""

    IDLE = "idle"
    SYNCING = "syncing"
    SUCCESS = "success"
    ERROR = "error"


class Standing(str, Enum):
    """Student standing shown in reports."""

    UP_TO_DATE = "AL DÍA"
    AT_RISK = "RIESGO DE REPROBACIÓN"


class RosterImportOutcome(str, Enum):
    IMPORTED = "IMPORTED"
    EMPTY = "EMPTY"
    FAILED = "FAILED"
