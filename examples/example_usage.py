"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

from config import load_settings

from src.classroom_attendance.classroom_attendance.container import build_container


def main():
    container = build_container(settings=load_settings())
    for course in container.course_store.courses:
        stats = container.statistics_service.summarize_course(course)
        if stats is None:
            print(course.name, "- sin estudiantes")
            continue
        print(course.name, f"clases={stats.total_classes}", f"en_riesgo={stats.at_risk_count}")
        for s in stats.student_summary:
            print(f"  {s.name}: {s.absences_count} faltas ({s.absence_rate:.1f}%)")


if __name__ == "__main__":
    main()
