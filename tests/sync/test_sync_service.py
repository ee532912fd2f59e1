from __future__ import annotations

import json
import threading

import pytest
import requests

from src.classroom_attendance.classroom_attendance.attendance.model import AttendanceEvent
from src.classroom_attendance.classroom_attendance.core.enums import SyncStatus
from src.classroom_attendance.classroom_attendance.settings.service import SettingsService
from src.classroom_attendance.classroom_attendance.sync.pusher import WebhookAttendancePusher
from src.classroom_attendance.classroom_attendance.sync.service import SyncService, build_payload, is_sync_enabled

EXEC_URL = "https://script.google.com/macros/s/abc/exec"


class FakeSettingsRepo:
    def __init__(self, teacher_name="Profe Marta", sync_url=EXEC_URL):
        self.teacher_name = teacher_name
        self.sync_url = sync_url

    def get_teacher_name(self):
        return self.teacher_name

    def set_teacher_name(self, value):
        self.teacher_name = value

    def get_sync_url(self):
        return self.sync_url

    def set_sync_url(self, value):
        self.sync_url = value


class RecordingPusher:
    def __init__(self, error: Exception | None = None):
        self.calls = []
        self._error = error

    def push(self, url, payload):
        self.calls.append((url, payload))
        if self._error:
            raise self._error


class ManualDispatch:
    """Holds jobs so a test can look at the in-flight status before running them."""

    def __init__(self):
        self.jobs = []

    def __call__(self, job):
        self.jobs.append(job)

    def run_all(self):
        jobs, self.jobs = self.jobs, []
        for job in jobs:
            job()


EVENT = AttendanceEvent(student_name="Ana", date="2024-01-10", present=False, course_name="Math 10")


def _service(pusher, *, sync_url=EXEC_URL):
    dispatch = ManualDispatch()
    scheduled = []
    svc = SyncService(
        pusher,
        SettingsService(FakeSettingsRepo(sync_url=sync_url)),
        dispatch=dispatch,
        schedule=lambda delay, job: scheduled.append((delay, job)),
    )
    return svc, dispatch, scheduled


def test_payload_shape():
    assert build_payload(EVENT, teacher_name="Profe Marta") == {
        "docente": "Profe Marta",
        "curso": "Math 10",
        "estudiante": "Ana",
        "fecha": "2024-01-10",
        "asistio": "NO",
    }
    present = AttendanceEvent(student_name="Ana", date="2024-01-10", present=True, course_name="Math 10")
    assert build_payload(present, teacher_name="X")["asistio"] == "SÍ"


@pytest.mark.parametrize(
    "url,enabled",
    [("", False), (None, False), ("https://example.com/hook", False), (EXEC_URL, True)],
)
def test_only_exec_urls_enable_sync(url, enabled):
    assert is_sync_enabled(url) is enabled


def test_disabled_sync_is_a_silent_noop():
    pusher = RecordingPusher()
    svc, dispatch, _ = _service(pusher, sync_url="https://example.com/hook")

    assert svc.handle_event(EVENT) is False
    assert dispatch.jobs == []
    assert svc.status == SyncStatus.IDLE


def test_successful_push_goes_syncing_success_then_idle():
    pusher = RecordingPusher()
    svc, dispatch, scheduled = _service(pusher)

    assert svc.handle_event(EVENT) is True
    assert svc.status == SyncStatus.SYNCING
    assert pusher.calls == []

    dispatch.run_all()
    assert svc.status == SyncStatus.SUCCESS
    assert pusher.calls == [(EXEC_URL, build_payload(EVENT, teacher_name="Profe Marta"))]

    [(delay, reset)] = scheduled
    assert delay == 2.0
    reset()
    assert svc.status == SyncStatus.IDLE


def test_failed_push_sets_error_without_retry():
    pusher = RecordingPusher(error=ConnectionError("offline"))
    svc, dispatch, scheduled = _service(pusher)

    svc.handle_event(EVENT)
    dispatch.run_all()

    assert svc.status == SyncStatus.ERROR
    assert len(pusher.calls) == 1
    assert scheduled == []


def test_test_event_uses_verification_payload():
    pusher = RecordingPusher()
    svc, dispatch, _ = _service(pusher)

    assert svc.send_test_event() is True
    dispatch.run_all()

    _, payload = pusher.calls[0]
    assert (payload["estudiante"], payload["fecha"], payload["curso"], payload["asistio"]) == (
        "VERIFICACIÓN",
        "2024-01-01",
        "SISTEMA",
        "SÍ",
    )


def test_webhook_pusher_posts_text_plain_json(monkeypatch):
    sent = []
    monkeypatch.setattr(requests, "post", lambda url, **kwargs: sent.append((url, kwargs)))
    pusher = WebhookAttendancePusher(timeout=3.0)

    pusher.push(EXEC_URL, {"estudiante": "Ana", "asistio": "SÍ"})

    [(url, kwargs)] = sent
    assert url == EXEC_URL
    assert kwargs["headers"] == {"Content-Type": "text/plain"}
    assert kwargs["timeout"] == 3.0
    assert json.loads(kwargs["data"].decode("utf-8")) == {"estudiante": "Ana", "asistio": "SÍ"}


def test_webhook_pusher_pushes_from_several_threads(monkeypatch):
    sent = []
    lock = threading.Lock()

    def post(url, **kwargs):
        with lock:
            sent.append(json.loads(kwargs["data"].decode("utf-8"))["estudiante"])

    monkeypatch.setattr(requests, "post", post)
    pusher = WebhookAttendancePusher()

    threads = [threading.Thread(target=pusher.push, args=(EXEC_URL, {"estudiante": f"E{i}"})) for i in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(sent) == ["E0", "E1", "E2", "E3", "E4"]
