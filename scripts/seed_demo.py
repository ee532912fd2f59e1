from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.classroom_attendance.classroom_attendance.container import build_container

DEMO_STUDENTS = ["Ana Gómez", "Beto Ruiz", "Camila Torres", "Daniel Ospina"]


def main() -> None:
    settings = load_settings()
    container = build_container(settings=settings)
    service = container.attendance_service

    course = service.add_course("Castellano 10-2", weeks=13, start_date="2024-01-08")
    students = service.append_students(course.id, DEMO_STUDENTS)

    # A couple of absences so the control matrix has something to show
    service.toggle_attendance(course.id, students[1].id, "2024-01-10")
    service.toggle_attendance(course.id, students[0].id, "2024-01-11")

    print(f"OK: Seeded course {course.name!r} with {len(students)} students -> {settings['DATA_DIR']}")


if __name__ == "__main__":
    main()
