"""
Persistence adapters.

These modules encapsulate how the slots are stored/retrieved (JSON file,
SQL table or plain memory). Services depend on the SlotStorage protocol and
on RecordsRepository rather than touching a backend directly.
"""

from .slot_storage import MemorySlotStorage, SlotStorage, StorageWriteError

__all__ = ["MemorySlotStorage", "SlotStorage", "StorageWriteError"]
