"""SQLAlchemy models backing the slot storage."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String, Text, func

from .session import Base, get_engine


class StorageSlot(Base):
    """One named slot holding a serialized collection."""

    __tablename__ = "storage_slots"

    name = Column(String(128), primary_key=True)
    payload = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


def create_tables() -> None:
    Base.metadata.create_all(bind=get_engine())
