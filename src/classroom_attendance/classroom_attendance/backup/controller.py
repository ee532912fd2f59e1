from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.api import error_response, json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/backup", methods=["GET"], endpoint="backup_download")
    @json_errors
    def backup_download():
        backup = container.backup_service.export_backup()
        return send_file(
            io.BytesIO(backup.content),
            mimetype=backup.mimetype,
            as_attachment=True,
            download_name=backup.filename,
        )

    @app.route("/api/backup", methods=["POST"], endpoint="backup_restore")
    @json_errors
    def backup_restore():
        upload = request.files.get("file")
        raw = upload.read() if upload is not None else request.get_data()
        if not raw:
            return error_response("Seleccione un archivo de respaldo", 400)

        courses = container.backup_service.import_backup(raw)
        return jsonify({"success": True, "message": "Datos restaurados.", "courses": len(courses)})
