import os
import tempfile

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", os.path.join(tempfile.gettempdir(), "classroom-attendance-test"))

DEFAULT_TEACHER_NAME = "Docente Julia"
AT_RISK_THRESHOLD = 20.0
BACKUP_IDENTIFIER = "JULIA"

GEMINI_API_KEY = ""
GEMINI_MODEL = "gemini-3-flash-preview"
ROSTER_KEEP_EXTERNAL_IDS = False

SYNC_TIMEOUT = 5.0

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
