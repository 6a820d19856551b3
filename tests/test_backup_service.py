from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from gttc.services.backup_service import (
    InvalidBackupError,
    default_backup_filename,
    dump_snapshot,
    export_snapshot,
    parse_backup,
    restore_backup,
    restore_backup_file,
    write_backup,
)

NOW = datetime(2026, 10, 19, 8, 15, tzinfo=timezone.utc)


def _fill(store):
    store.add_student(
        {"id": "CTT-101", "name": "Rahim", "mobile": "017", "course": "Plumbing", "fee": 5000, "admissionDate": "2026-01-10"},
        initial_payment=2000,
    )
    store.add_student({"id": "CTT-102", "name": "Karim", "mobile": "018", "course": "Plumbing", "fee": 3000, "admissionDate": "2026-01-11"})
    store.add_payment("CTT-102", {"amount": 500, "date": "2026-02-01", "method": "Bank", "category": "Monthly Fee"})
    store.add_expense({"amount": 1500, "date": "2026-01-12", "category": "Office Rent", "description": "rent"})


def test_snapshot_shape():
    snapshot = export_snapshot([], [], now=NOW)
    assert snapshot == {
        "students": [],
        "expenses": [],
        "exportDate": "2026-10-19T08:15:00.000Z",
        "version": "1.0",
    }


def test_default_filename_uses_current_date():
    assert default_backup_filename(NOW) == "GTTC_Backup_2026-10-19.json"


def test_export_then_import_restores_equal_state(store):
    _fill(store)
    students, expenses = store.students, store.expenses
    snapshot = export_snapshot(students, expenses, now=NOW)

    store.reset_data()
    assert store.import_data(snapshot) is True

    assert store.students == students
    assert store.expenses == expenses


def test_write_and_restore_backup_file(store, tmp_path):
    _fill(store)
    path = write_backup(store, tmp_path / "backups", now=NOW)

    assert path.name == "GTTC_Backup_2026-10-19.json"
    document = json.loads(path.read_text(encoding="utf-8"))
    assert [s["id"] for s in document["students"]] == ["CTT-101", "CTT-102"]

    expected = store.students
    store.reset_data()
    assert restore_backup_file(store, path) is True
    assert store.students == expected


def test_write_backup_defaults_to_configured_dir(store, tmp_path, monkeypatch, clean_settings):
    monkeypatch.setenv("BACKUP_DIR", str(tmp_path / "configured"))
    path = write_backup(store, now=NOW)
    assert path.parent == tmp_path / "configured"
    assert path.exists()


@pytest.mark.parametrize(
    "text",
    [
        "not json at all",
        "[]",
        json.dumps({"students": []}),
        json.dumps({"students": [], "expenses": {}}),
        json.dumps({"students": "x", "expenses": []}),
    ],
)
def test_malformed_backups_are_rejected(text):
    with pytest.raises(InvalidBackupError):
        parse_backup(text)


def test_rejected_backup_leaves_store_untouched(store):
    _fill(store)
    before = store.students
    with pytest.raises(InvalidBackupError):
        restore_backup(store, json.dumps({"students": []}))
    assert store.students == before


def test_restore_respects_confirmation(store):
    _fill(store)
    text = dump_snapshot(export_snapshot([], [], now=NOW))
    assert restore_backup(store, text, confirm=lambda message: False) is False
    assert len(store.students) == 2
    assert restore_backup(store, text) is True
    assert store.students == []


def test_missing_file_is_invalid_backup(store, tmp_path):
    with pytest.raises(InvalidBackupError):
        restore_backup_file(store, tmp_path / "nope.json")
