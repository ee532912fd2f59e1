from __future__ import annotations

import json

import pytest

from src.classroom_attendance.classroom_attendance.core.constants import STORAGE_KEY, SYNC_URL_KEY, TEACHER_NAME_KEY
from src.classroom_attendance.classroom_attendance.courses.persistence import load_store
from src.classroom_attendance.classroom_attendance.settings.service import SettingsService
from src.classroom_attendance.classroom_attendance.storage.json_course_repository import JsonCourseRepository
from src.classroom_attendance.classroom_attendance.storage.kv_store import JsonFileKeyValueStore
from src.classroom_attendance.classroom_attendance.storage.settings_repository import KeyValueSettingsRepository


def test_file_store_round_trip(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "data")

    assert store.get("k") is None
    store.set("k", "Docente Ñandú")
    assert store.get("k") == "Docente Ñandú"
    assert [p.name for p in (tmp_path / "data").iterdir()] == ["k.store"]


def test_file_store_rejects_path_like_keys(tmp_path):
    store = JsonFileKeyValueStore(tmp_path)
    with pytest.raises(ValueError):
        store.set("../escape", "x")


def test_missing_store_loads_empty(kv_store):
    assert JsonCourseRepository(kv_store).load_all() == []


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        '{"id": "c1"}',
        '[{"name": "no id"}]',
        "42",
        '[{"id": "c1", "name": "M", "students": [{"id": "s1", "name": "A", "attendance": {"2024-01-10": null}}]}]',
        '[{"id": "c1", "name": "M", "students": [{"id": "s1", "name": "A", "attendance": {"2024-01-10": "false"}}]}]',
    ],
)
def test_corrupt_store_falls_back_to_empty(kv_store, raw, caplog):
    kv_store.data[STORAGE_KEY] = raw

    assert JsonCourseRepository(kv_store).load_all() == []
    assert "unreadable" in caplog.text


def test_save_writes_the_exact_json_shape(kv_store, math_course):
    JsonCourseRepository(kv_store).save_all([math_course])

    saved = json.loads(kv_store.data[STORAGE_KEY])
    assert saved == [
        {
            "id": "c1",
            "name": "Math 10",
            "description": "",
            "weeks": 13,
            "startDate": "2024-01-08",
            "students": [
                {"id": "s1", "name": "Ana", "attendance": {"2024-01-11": False}, "grades": {}},
                {"id": "s2", "name": "Beto", "attendance": {"2024-01-10": False}, "grades": {}},
            ],
            "subjects": [],
        }
    ]


def test_store_changes_are_written_through(kv_store, math_course):
    repo = JsonCourseRepository(kv_store)
    repo.save_all([math_course])

    store = load_store(repo)
    store.remove("c1")

    assert kv_store.data[STORAGE_KEY] == "[]"
    assert load_store(repo).courses == ()


def test_course_list_survives_reload(tmp_path, math_course):
    repo = JsonCourseRepository(JsonFileKeyValueStore(tmp_path))
    repo.save_all([math_course])

    assert JsonCourseRepository(JsonFileKeyValueStore(tmp_path)).load_all() == [math_course]


def test_settings_defaults_and_single_key_writes(kv_store):
    svc = SettingsService(KeyValueSettingsRepository(kv_store))

    assert svc.teacher_name == "Docente Julia"
    assert svc.sync_url == ""

    svc.update(teacher_name="Profe Marta")
    assert kv_store.writes == [TEACHER_NAME_KEY]

    svc.update(sync_url="https://script.google.com/macros/s/abc/exec")
    assert kv_store.writes == [TEACHER_NAME_KEY, SYNC_URL_KEY]

    reloaded = SettingsService(KeyValueSettingsRepository(kv_store))
    assert reloaded.teacher_name == "Profe Marta"
    assert reloaded.sync_url.endswith("/exec")
