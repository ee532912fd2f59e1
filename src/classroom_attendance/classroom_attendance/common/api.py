from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify

from ..core.exceptions import BackupFormatError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_errors(view):
    """Map domain errors of a JSON view to 4xx responses, the rest to 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except (ValidationError, BackupFormatError) as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return error_response("Error interno del sistema", 500)

    return wrapper
