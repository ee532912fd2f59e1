"""Classroom Attendance package.

This package is organized by feature modules (courses, attendance, statistics,
sync, roster, ...) with a thin Flask controller layer on top of plain service
and repository layers.
"""
