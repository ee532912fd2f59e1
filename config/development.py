import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Folder holding one file per storage key (courses, teacher name, sync URL)
DATA_DIR = os.getenv("DATA_DIR", "data")

DEFAULT_TEACHER_NAME = os.getenv("DEFAULT_TEACHER_NAME", "Docente Julia")
AT_RISK_THRESHOLD = float(os.getenv("AT_RISK_THRESHOLD", "20"))
BACKUP_IDENTIFIER = os.getenv("BACKUP_IDENTIFIER", "JULIA")

# Roster import through Gemini
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")
ROSTER_KEEP_EXTERNAL_IDS = bool(int(os.getenv("ROSTER_KEEP_EXTERNAL_IDS", "0")))

# None leaves the timeout to the HTTP transport
SYNC_TIMEOUT = float(os.environ["SYNC_TIMEOUT"]) if os.getenv("SYNC_TIMEOUT") else None

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
