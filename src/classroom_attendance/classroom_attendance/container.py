from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.service import AttendanceService
from .backup.service import BackupService
from .core.constants import AT_RISK_THRESHOLD_PERCENT, DEFAULT_BACKUP_IDENTIFIER, DEFAULT_TEACHER_NAME
from .courses.persistence import load_store
from .courses.store import CourseStore
from .reports.service import ReportService
from .roster.parser import DEFAULT_GEMINI_MODEL, GeminiRosterParser, RosterParser
from .roster.service import RosterImportService
from .settings.service import SettingsService
from .statistics.service import StatisticsService
from .storage.json_course_repository import JsonCourseRepository
from .storage.kv_store import JsonFileKeyValueStore, KeyValueStore
from .storage.settings_repository import KeyValueSettingsRepository
from .sync.pusher import AttendancePusher, WebhookAttendancePusher
from .sync.service import Dispatcher, Scheduler, SyncService, run_in_background, run_later


@dataclass(frozen=True)
class Container:
    kv_store: KeyValueStore
    course_store: CourseStore

    courses_repo: JsonCourseRepository
    settings_repo: KeyValueSettingsRepository

    settings_service: SettingsService
    statistics_service: StatisticsService
    attendance_service: AttendanceService
    sync_service: SyncService
    roster_service: RosterImportService
    backup_service: BackupService
    report_service: ReportService


def build_container(
    *,
    settings: Mapping[str, Any],
    kv_store: Optional[KeyValueStore] = None,
    pusher: Optional[AttendancePusher] = None,
    roster_parser: Optional[RosterParser] = None,
    sync_dispatch: Optional[Dispatcher] = None,
    sync_schedule: Optional[Scheduler] = None,
) -> Container:
    kv_store = kv_store or JsonFileKeyValueStore(str(settings["DATA_DIR"]))

    courses_repo = JsonCourseRepository(kv_store)
    settings_repo = KeyValueSettingsRepository(
        kv_store,
        default_teacher_name=str(settings.get("DEFAULT_TEACHER_NAME") or DEFAULT_TEACHER_NAME),
    )

    course_store = load_store(courses_repo)

    settings_service = SettingsService(settings_repo)
    statistics_service = StatisticsService(
        threshold=float(settings.get("AT_RISK_THRESHOLD", AT_RISK_THRESHOLD_PERCENT)),
    )
    attendance_service = AttendanceService(course_store)

    pusher = pusher or WebhookAttendancePusher(timeout=settings.get("SYNC_TIMEOUT"))
    sync_service = SyncService(
        pusher,
        settings_service,
        dispatch=sync_dispatch or run_in_background,
        schedule=sync_schedule or run_later,
    )
    attendance_service.subscribe(sync_service.handle_event)

    roster_parser = roster_parser or GeminiRosterParser(
        api_key=settings.get("GEMINI_API_KEY") or None,
        model=str(settings.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL),
    )
    roster_service = RosterImportService(
        roster_parser,
        attendance_service,
        course_store,
        keep_external_ids=bool(settings.get("ROSTER_KEEP_EXTERNAL_IDS", False)),
    )

    backup_service = BackupService(
        course_store,
        identifier=str(settings.get("BACKUP_IDENTIFIER") or DEFAULT_BACKUP_IDENTIFIER),
    )
    report_service = ReportService(statistics_service)

    return Container(
        kv_store=kv_store,
        course_store=course_store,
        courses_repo=courses_repo,
        settings_repo=settings_repo,
        settings_service=settings_service,
        statistics_service=statistics_service,
        attendance_service=attendance_service,
        sync_service=sync_service,
        roster_service=roster_service,
        backup_service=backup_service,
        report_service=report_service,
    )
