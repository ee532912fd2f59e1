from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import error_response, json_errors
from ..container import Container
from ..sync.service import is_sync_enabled


def register(app: Flask, container: Container) -> None:
    settings = container.settings_service

    def _settings_view() -> dict:
        return {
            "teacherName": settings.teacher_name,
            "syncUrl": settings.sync_url,
            "syncEnabled": is_sync_enabled(settings.sync_url),
        }

    @app.route("/api/settings", methods=["GET"], endpoint="settings_get")
    @json_errors
    def settings_get():
        return jsonify(_settings_view())

    @app.route("/api/settings", methods=["PUT"], endpoint="settings_update")
    @json_errors
    def settings_update():
        data = request.get_json(silent=True) or {}
        teacher_name = data.get("teacherName")
        sync_url = data.get("syncUrl")
        if teacher_name is not None and not isinstance(teacher_name, str):
            return error_response("Nombre de docente inválido", 400)
        if sync_url is not None and not isinstance(sync_url, str):
            return error_response("URL de sincronización inválida", 400)

        settings.update(teacher_name=teacher_name, sync_url=sync_url.strip() if sync_url else sync_url)
        return jsonify(_settings_view())

    @app.route("/api/sync/status", methods=["GET"], endpoint="sync_status")
    @json_errors
    def sync_status():
        return jsonify({"status": container.sync_service.status.value})

    @app.route("/api/sync/test", methods=["POST"], endpoint="sync_test")
    @json_errors
    def sync_test():
        sent = container.sync_service.send_test_event()
        return jsonify({"sent": sent, "status": container.sync_service.status.value})
