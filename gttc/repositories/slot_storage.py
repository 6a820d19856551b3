"""Key-value slot contract shared by every storage backend."""
from __future__ import annotations

from typing import Optional, Protocol


class StorageWriteError(Exception):
    """Raised by a backend when a slot could not be written or removed."""

    def __init__(self, slot: str, message: str):
        super().__init__(f"{slot}: {message}")
        self.slot = slot
        self.message = message


class SlotStorage(Protocol):
    """Named text slots, in the spirit of a browser's local storage."""

    def get(self, name: str) -> Optional[str]:
        ...

    def set(self, name: str, value: str) -> None:
        ...

    def remove(self, name: str) -> None:
        ...


class MemorySlotStorage:
    """Process-local slots; nothing survives the interpreter."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, name: str) -> Optional[str]:
        return self._slots.get(name)

    def set(self, name: str, value: str) -> None:
        self._slots[name] = value

    def remove(self, name: str) -> None:
        self._slots.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return name in self._slots
