"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "julia_restrepo_v5_final"
TEACHER_NAME_KEY = "julia_teacher_name"
SYNC_URL_KEY = "julia_sync_url"

DEFAULT_TEACHER_NAME = "Docente Julia"
DEFAULT_COURSE_WEEKS = 13
DEFAULT_BACKUP_IDENTIFIER = "JULIA"

AT_RISK_THRESHOLD_PERCENT = 20.0

SYNC_ENDPOINT_MARKER = "/exec"
SYNC_RESET_SECONDS = 2.0

DATE_FORMAT = "%Y-%m-%d"
