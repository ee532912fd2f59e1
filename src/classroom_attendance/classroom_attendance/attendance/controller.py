from __future__ import annotations

import io
from dataclasses import asdict

from flask import Flask, jsonify, request, send_file
from werkzeug.utils import secure_filename

from ..common.api import error_response, json_errors
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_iso_date
from ..container import Container
from ..core.exceptions import NotFoundError
from ..reports.writers import write_report_csv, write_report_xlsx


def register(app: Flask, container: Container) -> None:
    def _require_course(course_id: str):
        course = container.course_store.get(course_id)
        if not course:
            raise NotFoundError("El grupo no existe")
        return course

    @app.route(
        "/api/courses/<course_id>/students/<student_id>/attendance/<day>/toggle",
        methods=["POST"],
        endpoint="attendance_toggle",
    )
    @json_errors
    def attendance_toggle(course_id: str, student_id: str, day: str):
        event = container.attendance_service.toggle_attendance(course_id, student_id, day)
        return jsonify(
            {
                "success": True,
                "date": event.date,
                "present": event.present,
                "syncStatus": container.sync_service.status.value,
            }
        )

    @app.route("/api/courses/<course_id>/stats", methods=["GET"], endpoint="course_stats")
    @json_errors
    def course_stats(course_id: str):
        course = _require_course(course_id)
        stats = container.statistics_service.summarize_course(course)
        if stats is None:
            return jsonify({"stats": None})

        grid = container.statistics_service.attendance_grid(course)
        return jsonify(
            {
                "stats": {
                    "recordedDates": list(stats.recorded_dates),
                    "totalClasses": stats.total_classes,
                    "atRiskCount": stats.at_risk_count,
                    "studentSummary": [
                        {
                            "id": s.id,
                            "name": s.name,
                            "absencesCount": s.absences_count,
                            "absencesDates": list(s.absence_dates),
                            "absenceRate": s.absence_rate,
                            "atRisk": s.is_at_risk,
                        }
                        for s in stats.student_summary
                    ],
                },
                "grid": {sid: [asdict(cell) for cell in cells] for sid, cells in grid.items()},
            }
        )

    @app.route("/api/courses/<course_id>/report.<fmt>", methods=["GET"], endpoint="course_report")
    @json_errors
    def course_report(course_id: str, fmt: str):
        course = _require_course(course_id)
        # The file is named after the day being viewed, today when none is given.
        viewed = request.args.get("date")
        on = parse_iso_date(require_iso_date(viewed, "Fecha")) if viewed else None
        data = container.report_service.build_course_report(course)

        if fmt == "xlsx":
            content = write_report_xlsx(data)
            mimetype = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        elif fmt == "csv":
            content = write_report_csv(data)
            mimetype = "text/csv"
        else:
            return error_response("Formato no soportado", 400)

        filename = container.report_service.report_filename(course, on=on, extension=fmt)
        return send_file(
            io.BytesIO(content),
            mimetype=mimetype,
            as_attachment=True,
            download_name=secure_filename(filename) or f"report.{fmt}",
        )
