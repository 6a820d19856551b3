from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote gttc seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gttc.core import config as core_config  # noqa: E402
from gttc.repositories.json_storage import JsonSlotStorage  # noqa: E402
from gttc.repositories.records_repository import RecordsRepository  # noqa: E402
from gttc.services.records_service import RecordsStore  # noqa: E402


def always_yes(message: str) -> bool:
    return True


@pytest.fixture()
def slot_file(tmp_path):
    return tmp_path / "slots.json"


@pytest.fixture()
def repository(slot_file):
    return RecordsRepository(JsonSlotStorage(slot_file))


@pytest.fixture()
def store(repository):
    return RecordsStore(repository, confirm=always_yes, clock=lambda: 1700000000.0)


@pytest.fixture()
def clean_settings(monkeypatch):
    """Drop cached settings before and after the test so env changes apply."""
    for var in ("APP_ENV", "STORAGE_BACKEND", "DATA_FILE", "DATABASE_URL", "STUDENTS_SLOT", "EXPENSES_SLOT", "BACKUP_DIR"):
        monkeypatch.delenv(var, raising=False)
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()
