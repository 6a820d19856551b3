"""Backup export/restore use cases (download a snapshot, upload it back)."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from gttc.core.config import get_settings
from gttc.core.utils import timestamp_iso, today_iso
from gttc.domain.records import Expense, Student
from gttc.services.records_service import Confirm, RecordsStore

logger = logging.getLogger(__name__)

BACKUP_VERSION = "1.0"
BACKUP_PREFIX = "GTTC_Backup_"


class BackupError(Exception):
    """Base exception for backup workflow."""


class InvalidBackupError(BackupError):
    """Raised when an uploaded document is not a usable backup."""


def export_snapshot(
    students: Iterable[Student],
    expenses: Iterable[Expense],
    now: Optional[datetime] = None,
) -> dict:
    return {
        "students": [student.to_dict() for student in students],
        "expenses": [expense.to_dict() for expense in expenses],
        "exportDate": timestamp_iso(now),
        "version": BACKUP_VERSION,
    }


def dump_snapshot(snapshot: dict) -> str:
    return json.dumps(snapshot, ensure_ascii=False, indent=2)


def default_backup_filename(now: Optional[datetime] = None) -> str:
    return f"{BACKUP_PREFIX}{today_iso(now)}.json"


def write_backup(
    store: RecordsStore,
    directory: Path | str | None = None,
    now: Optional[datetime] = None,
) -> Path:
    """Write the current collections to <directory>/GTTC_Backup_<date>.json (BACKUP_DIR by default)."""
    target_dir = Path(directory) if directory else get_settings().backup_dir
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / default_backup_filename(now)
    snapshot = export_snapshot(store.students, store.expenses, now=now)
    target.write_text(dump_snapshot(snapshot), encoding="utf-8")
    logger.info("Backup written to %s", target)
    return target


def validate_backup(document) -> dict:
    """
    Accept only an object whose students and expenses fields are both arrays.
    """
    if not isinstance(document, dict):
        raise InvalidBackupError("Wrong file format. Upload a valid backup file.")
    if not (isinstance(document.get("students"), list) and isinstance(document.get("expenses"), list)):
        raise InvalidBackupError("Wrong file format. Upload a valid backup file.")
    return {"students": document["students"], "expenses": document["expenses"]}


def parse_backup(text: str | bytes) -> dict:
    try:
        document = json.loads(text)
    except ValueError as exc:
        raise InvalidBackupError("Could not read the file. Provide a valid JSON backup.") from exc
    return validate_backup(document)


def restore_backup(store: RecordsStore, text: str | bytes, confirm: Optional[Confirm] = None) -> bool:
    """Parse an uploaded backup and hand it to import_data. Raises InvalidBackupError."""
    payload = parse_backup(text)
    return store.import_data(payload, confirm=confirm)


def restore_backup_file(store: RecordsStore, path: Path | str, confirm: Optional[Confirm] = None) -> bool:
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidBackupError(f"Could not read {source.name}: {exc}") from exc
    return restore_backup(store, text, confirm=confirm)
