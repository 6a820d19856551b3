"""Slot backend stored in a SQL table through SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
import logging

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from gttc.db.models import StorageSlot, create_tables
from gttc.db.session import get_session

from .slot_storage import StorageWriteError

logger = logging.getLogger(__name__)


class SQLSlotStorage:
    """One row per slot in the storage_slots table."""

    def __init__(self, *, ensure_schema: bool = True) -> None:
        if ensure_schema:
            create_tables()

    def get(self, name: str) -> Optional[str]:
        try:
            with get_session() as session:
                entity = session.get(StorageSlot, name)
                return entity.payload if entity else None
        except SQLAlchemyError as exc:
            logger.warning("Could not read slot %s: %s", name, exc)
            return None

    def set(self, name: str, value: str) -> None:
        try:
            with get_session() as session:
                entity = session.get(StorageSlot, name)
                if not entity:
                    session.add(StorageSlot(name=name, payload=value))
                else:
                    entity.payload = value
                    entity.updated_at = datetime.now(timezone.utc)
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageWriteError(name, str(exc)) from exc

    def remove(self, name: str) -> None:
        try:
            with get_session() as session:
                session.execute(delete(StorageSlot).where(StorageSlot.name == name))
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageWriteError(name, str(exc)) from exc

    def slot_names(self) -> list[str]:
        with get_session() as session:
            return [row.name for row in session.query(StorageSlot.name).order_by(StorageSlot.name)]
