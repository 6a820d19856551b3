"""Entry point wiring a RecordsStore to the configured slot backend."""
from __future__ import annotations

from typing import Callable, Optional

from gttc.core.config import STORAGE_BACKENDS, Settings, get_settings
from gttc.repositories.json_storage import JsonSlotStorage
from gttc.repositories.records_repository import RecordsRepository
from gttc.repositories.slot_storage import MemorySlotStorage, SlotStorage, StorageWriteError
from gttc.services.records_service import Confirm, RecordsStore, refuse


def create_storage(settings: Settings) -> SlotStorage:
    backend = settings.storage_backend
    if backend == "json":
        return JsonSlotStorage(settings.data_file)
    if backend == "sql":
        # imported lazily so the JSON backend works without a database configured
        from gttc.repositories.sql_repository import SQLSlotStorage

        return SQLSlotStorage()
    if backend == "memory":
        return MemorySlotStorage()
    raise ValueError(f"Unknown storage backend {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}")


def create_store(
    settings: Optional[Settings] = None,
    *,
    confirm: Confirm = refuse,
    on_write_error: Optional[Callable[[StorageWriteError], None]] = None,
) -> RecordsStore:
    """Factory used by callers; loads both collections from storage."""
    settings = settings or get_settings()
    repository = RecordsRepository(
        create_storage(settings),
        students_slot=settings.students_slot,
        expenses_slot=settings.expenses_slot,
    )
    return RecordsStore(repository, confirm=confirm, on_write_error=on_write_error)
