"""Replace the stored course list with a backup file (full overwrite)."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.classroom_attendance.classroom_attendance.container import build_container
from src.classroom_attendance.classroom_attendance.core.exceptions import BackupFormatError


def main(argv: list[str]) -> None:
    if len(argv) != 2:
        raise SystemExit("Uso: python scripts/restore.py BACKUP_<ID>_<fecha>.json")

    container = build_container(settings=load_settings())
    try:
        courses = container.backup_service.import_backup(Path(argv[1]).read_bytes())
    except BackupFormatError as e:
        raise SystemExit(f"ERROR: {e}")
    print(f"OK: Restored {len(courses)} courses from {argv[1]}")


if __name__ == "__main__":
    main(sys.argv)
