from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .container import build_container
from .attendance.controller import register as register_attendance
from .backup.controller import register as register_backup
from .courses.controller import register as register_courses
from .settings.controller import register as register_settings


def create_app(settings_overrides: Optional[Mapping[str, Any]] = None, **container_options) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = load_settings(settings_module)
    settings.update(settings_overrides or {})

    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger(__name__).info("settings=%s data_dir=%s", settings_module, settings["DATA_DIR"])

    container = build_container(settings=settings, **container_options)
    app.extensions["classroom_attendance"] = container

    register_courses(app, container)
    register_attendance(app, container)
    register_settings(app, container)
    register_backup(app, container)

    return app
