from __future__ import annotations

from dataclasses import replace

import pytest

from src.classroom_attendance.classroom_attendance.courses.model import Course, Student
from src.classroom_attendance.classroom_attendance.statistics.service import (
    StatisticsService,
    effective_presence,
    recorded_dates,
)


def test_scenario_two_students_each_absent_once(math_course):
    stats = StatisticsService().summarize_course(math_course)

    assert stats.recorded_dates == ("2024-01-10", "2024-01-11")
    assert stats.total_classes == 2

    ana, beto = stats.student_summary
    assert (ana.name, ana.absences_count, ana.absence_rate, ana.is_at_risk) == ("Ana", 1, 50.0, True)
    assert (beto.name, beto.absences_count, beto.absence_rate, beto.is_at_risk) == ("Beto", 1, 50.0, True)
    assert ana.absence_dates == ("2024-01-11",)
    assert stats.at_risk_count == 2


def test_summary_is_idempotent(math_course):
    svc = StatisticsService()
    assert svc.summarize_course(math_course) == svc.summarize_course(math_course)


def test_course_without_students_has_no_statistics():
    course = Course(id="c", name="Empty", weeks=13, start_date="2024-01-08")
    assert StatisticsService().summarize_course(course) is None
    assert StatisticsService().summarize_course(None) is None


def test_recorded_dates_is_sorted_union_without_duplicates():
    course = Course(
        id="c",
        name="X",
        weeks=10,
        start_date="2024-01-01",
        students=(
            Student(id="a", name="A", attendance={"2024-02-01": True, "2024-01-15": False}),
            Student(id="b", name="B", attendance={"2024-01-15": True, "2024-01-03": True}),
            Student(id="c", name="C"),
        ),
    )
    assert recorded_dates(course) == ("2024-01-03", "2024-01-15", "2024-02-01")


def test_new_absence_raises_denominator_for_everyone(math_course):
    svc = StatisticsService()
    ana = math_course.students[0]
    course = math_course.with_student(ana.with_attendance("2024-01-12", False))

    stats = svc.summarize_course(course)
    beto = stats.for_student("s2")

    assert stats.total_classes == 3
    assert beto.absences_count == 1
    assert beto.absence_rate == pytest.approx(100 / 3)


def test_explicit_present_entries_do_not_count_as_absences():
    course = Course(
        id="c",
        name="X",
        weeks=10,
        start_date="2024-01-01",
        students=(
            Student(id="a", name="A", attendance={f"2024-01-{d:02d}": True for d in range(1, 10)} | {"2024-01-10": False}),
        ),
    )
    summary = StatisticsService().summarize_course(course).student_summary[0]

    assert summary.absences_count == 1
    assert summary.absence_rate == pytest.approx(10.0)
    assert summary.is_at_risk is False


def test_threshold_is_inclusive_and_configurable():
    course = Course(
        id="c",
        name="X",
        weeks=10,
        start_date="2024-01-01",
        students=(
            Student(
                id="a",
                name="A",
                attendance={"2024-01-01": False, "2024-01-02": True, "2024-01-03": True, "2024-01-04": True, "2024-01-05": True},
            ),
        ),
    )
    assert StatisticsService().summarize_course(course).student_summary[0].is_at_risk is True
    assert StatisticsService(threshold=25).summarize_course(course).student_summary[0].is_at_risk is False


def test_summary_sorted_by_name_ignoring_accents_and_case(math_course):
    course = replace(
        math_course,
        students=(
            Student(id="1", name="carlos"),
            Student(id="2", name="Ángela"),
            Student(id="3", name="Beto"),
        ),
    )
    names = [s.name for s in StatisticsService().summarize_course(course).student_summary]
    assert names == ["Ángela", "Beto", "carlos"]


def test_rate_is_zero_when_nothing_recorded():
    course = Course(id="c", name="X", weeks=10, start_date="2024-01-01", students=(Student(id="a", name="A"),))
    summary = StatisticsService().summarize_course(course).student_summary[0]
    assert summary.absence_rate == 0.0
    assert summary.absences_count == 0


def test_grid_marks_unrecorded_dates_as_present(math_course):
    grid = StatisticsService().attendance_grid(math_course)

    ana_cells = grid["s1"]
    assert [(c.date, c.present, c.recorded) for c in ana_cells] == [
        ("2024-01-10", True, False),
        ("2024-01-11", False, True),
    ]
    assert effective_presence(math_course.students[0], "2030-01-01") is True
