"""
Serializes the student and expense collections into their two slots.

Reads never raise: a missing slot is an empty collection, and so is a slot
holding text that does not decode to a JSON array (that case is logged).
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Sequence

from gttc.domain.records import Expense, Student, expenses_from_list, students_from_list

from .slot_storage import SlotStorage

logger = logging.getLogger(__name__)

DEFAULT_STUDENTS_SLOT = "gttc_students_db"
DEFAULT_EXPENSES_SLOT = "gttc_expenses_db"


def dump_collection(records: Sequence[Any]) -> str:
    return json.dumps([record.to_dict() for record in records], ensure_ascii=False)


class RecordsRepository:
    def __init__(
        self,
        storage: SlotStorage,
        *,
        students_slot: str = DEFAULT_STUDENTS_SLOT,
        expenses_slot: str = DEFAULT_EXPENSES_SLOT,
    ) -> None:
        self.storage = storage
        self.students_slot = students_slot
        self.expenses_slot = expenses_slot

    def _load(self, slot: str, decode: Callable[[list], list]) -> list:
        raw = self.storage.get(slot)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError as exc:
            logger.warning("Failed to load slot %s: %s", slot, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Failed to load slot %s: expected an array, got %s", slot, type(data).__name__)
            return []
        return decode(data)

    def load_students(self) -> list[Student]:
        return self._load(self.students_slot, students_from_list)

    def load_expenses(self) -> list[Expense]:
        return self._load(self.expenses_slot, expenses_from_list)

    def save_students(self, students: Sequence[Student]) -> None:
        self.storage.set(self.students_slot, dump_collection(students))

    def save_expenses(self, expenses: Sequence[Expense]) -> None:
        self.storage.set(self.expenses_slot, dump_collection(expenses))

    # removal drops the slot entirely (absent, not persisted-empty)
    def remove_students(self) -> None:
        self.storage.remove(self.students_slot)

    def remove_expenses(self) -> None:
        self.storage.remove(self.expenses_slot)
