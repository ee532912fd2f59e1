from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_short_date, today_local
from ..core.constants import DATE_FORMAT
from ..core.enums import Standing
from ..courses.model import Course
from ..statistics.service import StatisticsService

REPORT_COLUMNS = [
    "Nº",
    "ESTUDIANTE",
    "CLASES REGISTRADAS",
    "TOTAL FALTAS",
    "% INASISTENCIA",
    "ESTADO",
    "FECHAS DE FALTAS",
]

NO_ABSENCES_LABEL = "Sin faltas"


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


class ReportService:
    """Control matrix for one course, one row per student in roster order."""

    def __init__(self, statistics: StatisticsService):
        self._statistics = statistics

    def build_course_report(self, course: Course) -> ReportData:
        stats = self._statistics.summarize_course(course)
        total_classes = stats.total_classes if stats else 0

        rows: list[dict] = []
        for idx, s in enumerate(course.students, start=1):
            st = stats.for_student(s.id) if stats else None
            rate = st.absence_rate if st else 0.0
            at_risk = bool(st and st.is_at_risk)
            absences = ", ".join(format_short_date(d) for d in st.absence_dates) if st else ""

            rows.append(
                {
                    "Nº": idx,
                    "ESTUDIANTE": s.name,
                    "CLASES REGISTRADAS": total_classes,
                    "TOTAL FALTAS": st.absences_count if st else 0,
                    "% INASISTENCIA": f"{rate:.1f}%",
                    "ESTADO": (Standing.AT_RISK if at_risk else Standing.UP_TO_DATE).value,
                    "FECHAS DE FALTAS": absences or NO_ABSENCES_LABEL,
                }
            )

        summary = {
            "course": course.name,
            "total_classes": total_classes,
            "students": len(course.students),
            "at_risk": stats.at_risk_count if stats else 0,
        }
        return ReportData(rows=rows, summary=summary)

    @staticmethod
    def report_filename(course: Course, *, on: Optional[date] = None, extension: str = "xlsx") -> str:
        on = on or today_local()
        return f"Asistencia_{course.name}_{on.strftime(DATE_FORMAT)}.{extension}"
