from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import error_response, json_errors
from ..common.datetime_utils import calculate_current_week
from ..container import Container
from ..core.constants import DEFAULT_COURSE_WEEKS


def register(app: Flask, container: Container) -> None:
    store = container.course_store

    def _course_view(course) -> dict:
        data = course.to_dict()
        data["currentWeek"] = calculate_current_week(course.start_date, course.weeks)
        return data

    @app.route("/api/courses", methods=["GET"], endpoint="courses_list")
    @json_errors
    def courses_list():
        return jsonify(
            {
                "courses": [_course_view(c) for c in store.courses],
                "activeCourseId": store.active_course_id,
            }
        )

    @app.route("/api/courses", methods=["POST"], endpoint="courses_create")
    @json_errors
    def courses_create():
        data = request.get_json(silent=True) or {}
        course = container.attendance_service.add_course(
            data.get("name") or "",
            weeks=DEFAULT_COURSE_WEEKS if data.get("weeks") is None else data["weeks"],
            start_date=data.get("startDate") or None,
        )
        if not course:
            return error_response("El nombre del grupo es obligatorio", 400)
        return jsonify(_course_view(course)), 201

    @app.route("/api/courses/<course_id>", methods=["DELETE"], endpoint="courses_delete")
    @json_errors
    def courses_delete(course_id: str):
        if not container.attendance_service.delete_course(course_id):
            return error_response("El grupo no existe", 404)
        return jsonify({"success": True, "activeCourseId": store.active_course_id})

    @app.route("/api/courses/active", methods=["PUT"], endpoint="courses_select")
    @json_errors
    def courses_select():
        data = request.get_json(silent=True) or {}
        container.attendance_service.select_course(data.get("courseId") or None)
        return jsonify({"activeCourseId": store.active_course_id})

    @app.route("/api/courses/<course_id>/students", methods=["POST"], endpoint="students_create")
    @json_errors
    def students_create(course_id: str):
        data = request.get_json(silent=True) or {}
        student = container.attendance_service.add_student(course_id, data.get("name") or "")
        if not student:
            return error_response("El nombre del estudiante es obligatorio", 400)
        return jsonify(student.to_dict()), 201

    @app.route("/api/courses/<course_id>/roster-import", methods=["POST"], endpoint="roster_import")
    @json_errors
    def roster_import(course_id: str):
        upload = request.files.get("file")
        if upload is None:
            return error_response("Seleccione un archivo", 400)

        result = container.roster_service.import_roster(
            course_id,
            upload.read(),
            upload.mimetype or "application/octet-stream",
        )
        return jsonify(
            {
                "outcome": result.outcome.value,
                "added": [s.to_dict() for s in result.students],
                "error": result.error,
            }
        )
