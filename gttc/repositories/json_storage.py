"""
JSON-file slot backend.

The whole file is one JSON object mapping slot name to its serialized text.
It is re-read on every access and rewritten on every change.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import json
import logging

from .slot_storage import StorageWriteError

logger = logging.getLogger(__name__)


class JsonSlotStorage:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read slot file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Slot file %s does not hold an object; ignoring it", self.path)
            return {}
        return data

    def save(self, slots: dict, slot: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(slots, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise StorageWriteError(slot, str(exc)) from exc

    def get(self, name: str) -> Optional[str]:
        value = self.load().get(name)
        return value if isinstance(value, str) else None

    def set(self, name: str, value: str) -> None:
        slots = self.load()
        slots[name] = value
        self.save(slots, name)

    def remove(self, name: str) -> None:
        slots = self.load()
        if name not in slots:
            return
        del slots[name]
        self.save(slots, name)
