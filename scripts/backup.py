"""Write a portable backup of the course list.

Same JSON document the /api/backup endpoint serves, saved under `backups/`.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.classroom_attendance.classroom_attendance.container import build_container


def main() -> None:
    settings = load_settings()
    container = build_container(settings=settings)

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    backup = container.backup_service.export_backup()
    out_file = out_dir / backup.filename
    out_file.write_bytes(backup.content)
    print(f"OK: Backup created: {out_file} (courses={len(container.course_store.courses)})")


if __name__ == "__main__":
    main()
