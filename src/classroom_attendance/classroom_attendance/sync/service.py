from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from ..attendance.model import AttendanceEvent
from ..core.constants import SYNC_ENDPOINT_MARKER, SYNC_RESET_SECONDS
from ..core.enums import SyncStatus
from ..settings.service import SettingsService
from .pusher import AttendancePusher

logger = logging.getLogger(__name__)

Dispatcher = Callable[[Callable[[], None]], None]
Scheduler = Callable[[float, Callable[[], None]], None]

VERIFICATION_EVENT = AttendanceEvent(student_name="VERIFICACIÓN", date="2024-01-01", present=True, course_name="SISTEMA")


def run_in_background(job: Callable[[], None]) -> None:
    threading.Thread(target=job, daemon=True).start()


def run_later(delay: float, job: Callable[[], None]) -> None:
    timer = threading.Timer(delay, job)
    timer.daemon = True
    timer.start()


def is_sync_enabled(url: Optional[str]) -> bool:
    return bool(url) and SYNC_ENDPOINT_MARKER in url


def build_payload(event: AttendanceEvent, *, teacher_name: str) -> dict[str, str]:
    return {
        "docente": teacher_name,
        "curso": event.course_name,
        "estudiante": event.student_name,
        "fecha": event.date,
        "asistio": "SÍ" if event.present else "NO",
    }


class SyncService:
    """Best-effort, fire-and-forget push of attendance events.

    No retry, no queue, no ordering across pushes. Local data is already
    persisted when an event reaches this service.
    """

    def __init__(
        self,
        pusher: AttendancePusher,
        settings: SettingsService,
        *,
        dispatch: Dispatcher = run_in_background,
        schedule: Scheduler = run_later,
        reset_seconds: float = SYNC_RESET_SECONDS,
    ):
        self._pusher = pusher
        self._settings = settings
        self._dispatch = dispatch
        self._schedule = schedule
        self._reset_seconds = reset_seconds
        self._status = SyncStatus.IDLE
        self._lock = threading.Lock()

    @property
    def status(self) -> SyncStatus:
        return self._status

    def _set_status(self, status: SyncStatus) -> None:
        with self._lock:
            self._status = status

    def _reset_if_success(self) -> None:
        with self._lock:
            if self._status == SyncStatus.SUCCESS:
                self._status = SyncStatus.IDLE

    def handle_event(self, event: AttendanceEvent) -> bool:
        """Dispatch one push. Returns False when sync is disabled."""
        url = self._settings.sync_url
        if not is_sync_enabled(url):
            return False

        payload = build_payload(event, teacher_name=self._settings.teacher_name)
        self._set_status(SyncStatus.SYNCING)

        def job() -> None:
            try:
                self._pusher.push(url, payload)
            except Exception as e:
                logger.warning("Sync push to %s failed: %s", url, e)
                self._set_status(SyncStatus.ERROR)
                return
            self._set_status(SyncStatus.SUCCESS)
            self._schedule(self._reset_seconds, self._reset_if_success)

        self._dispatch(job)
        return True

    def send_test_event(self) -> bool:
        return self.handle_event(VERIFICATION_EVENT)
