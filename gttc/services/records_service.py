"""
In-memory student/expense collections with write-through persistence.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Any, Callable, Mapping, Optional

from gttc.domain.lookups import find_student_insensitive
from gttc.domain.records import (
    ADMISSION_FEE_CATEGORY,
    Expense,
    Payment,
    Student,
    expenses_from_list,
    students_from_list,
)
from gttc.domain.summary import Summary, summarize
from gttc.repositories.records_repository import RecordsRepository
from gttc.repositories.slot_storage import StorageWriteError

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]

DELETE_STUDENT_PROMPT = "Are you sure you want to delete this student's records?"
DELETE_EXPENSE_PROMPT = "Are you sure you want to delete this expense?"
IMPORT_PROMPT = "Warning: current data will be replaced by the uploaded data. Continue?"
RESET_PROMPT = "Warning: all data will be deleted. This cannot be undone. Continue?"
RESET_SECOND_PROMPT = "Really delete everything?"


def refuse(message: str) -> bool:
    """Default confirmation: nothing destructive happens unless a caller opts in."""
    return False


class RecordsStore:
    """Owns the student and expense collections and persists every change."""

    def __init__(
        self,
        repository: RecordsRepository,
        *,
        confirm: Confirm = refuse,
        on_write_error: Optional[Callable[[StorageWriteError], None]] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.repository = repository
        self.confirm = confirm
        self.on_write_error = on_write_error
        self.last_write_error: Optional[StorageWriteError] = None
        self._clock = clock
        self._students: list[Student] = []
        self._expenses: list[Expense] = []
        self.reload()

    # -------------------------- reads --------------------------
    @property
    def students(self) -> list[Student]:
        return list(self._students)

    @property
    def expenses(self) -> list[Expense]:
        return list(self._expenses)

    def reload(self) -> None:
        self._students = self.repository.load_students()
        self._expenses = self.repository.load_expenses()

    def find_student(self, student_id: str) -> Optional[Student]:
        for student in self._students:
            if student.id == student_id:
                return student
        return None

    def resolve_student_id(self, value: str | None) -> Optional[str]:
        """Stored id for a typed-in id, ignoring case and surrounding spaces."""
        student = find_student_insensitive(self._students, value)
        return student.id if student else None

    def summary(self, today: Optional[str] = None) -> Summary:
        return summarize(self._students, self._expenses, today=today)

    # -------------------------- persistence --------------------------
    def _write(self, action: Callable[[], None]) -> None:
        try:
            action()
        except StorageWriteError as exc:
            logger.exception("Could not persist slot %s", exc.slot)
            # the first failure of a mutation is the one kept
            if self.last_write_error is None:
                self.last_write_error = exc
            if self.on_write_error is not None:
                self.on_write_error(exc)

    def _persist(self, *actions: Callable[[], None]) -> None:
        """Run every write of one mutation, even after an earlier one failed."""
        self.last_write_error = None
        for action in actions:
            self._write(action)

    def _save_students(self) -> None:
        self.repository.save_students(self._students)

    def _save_expenses(self) -> None:
        self.repository.save_expenses(self._expenses)

    def _confirmed(self, message: str, confirm: Optional[Confirm]) -> bool:
        return bool((confirm or self.confirm)(message))

    # -------------------------- students --------------------------
    def add_student(
        self,
        data: Student | Mapping[str, Any],
        initial_payment: float = 0,
        method: str = "Cash",
    ) -> Optional[str]:
        """
        Admit a student. Returns the id as supplied, or None when the id is
        already taken by another student regardless of case.
        """
        student = data if isinstance(data, Student) else Student.from_dict(data)
        wanted = student.id.lower()
        if any(existing.id.lower() == wanted for existing in self._students):
            return None

        payments = []
        if initial_payment > 0:
            payments.append(
                Payment(
                    amount=initial_payment,
                    date=student.admission_date,
                    method=method,
                    category=ADMISSION_FEE_CATEGORY,
                )
            )
        self._students = [*self._students, replace(student, payments=payments)]
        self._persist(self._save_students)
        return student.id

    def add_payment(self, student_id: str, payment: Payment | Mapping[str, Any]) -> bool:
        """
        Append a payment to the student with exactly this id. The lookup is
        case-sensitive, unlike the duplicate check in add_student.
        """
        for index, student in enumerate(self._students):
            if student.id == student_id:
                break
        else:
            return False

        entry = payment if isinstance(payment, Payment) else Payment.from_dict(payment)
        updated = list(self._students)
        updated[index] = student.with_payment(entry)
        self._students = updated
        self._persist(self._save_students)
        return True

    def delete_student(self, student_id: str, confirm: Optional[Confirm] = None) -> bool:
        if not self._confirmed(DELETE_STUDENT_PROMPT, confirm):
            return False
        self._students = [s for s in self._students if s.id != student_id]
        self._persist(self._save_students)
        return True

    # -------------------------- expenses --------------------------
    def _next_expense_id(self) -> str:
        stamp = int(self._clock() * 1000)
        taken = {expense.id for expense in self._expenses}
        while str(stamp) in taken:
            stamp += 1
        return str(stamp)

    def add_expense(self, data: Expense | Mapping[str, Any]) -> Expense:
        """Store a new expense at the front of the list under a fresh id."""
        expense = data if isinstance(data, Expense) else Expense.from_dict(data)
        expense = replace(expense, id=self._next_expense_id())
        self._expenses = [expense, *self._expenses]
        self._persist(self._save_expenses)
        return expense

    def delete_expense(self, expense_id: str, confirm: Optional[Confirm] = None) -> bool:
        if not self._confirmed(DELETE_EXPENSE_PROMPT, confirm):
            return False
        self._expenses = [e for e in self._expenses if e.id != expense_id]
        self._persist(self._save_expenses)
        return True

    # -------------------------- bulk --------------------------
    def import_data(self, data: Mapping[str, Any], confirm: Optional[Confirm] = None) -> bool:
        """
        Replace both collections. A field that is not a list is taken as an
        empty collection. Both slots are written before returning.
        """
        if not self._confirmed(IMPORT_PROMPT, confirm):
            return False
        raw_students = data.get("students")
        raw_expenses = data.get("expenses")
        self._students = students_from_list(raw_students) if isinstance(raw_students, list) else []
        self._expenses = expenses_from_list(raw_expenses) if isinstance(raw_expenses, list) else []
        self._persist(self._save_students, self._save_expenses)
        logger.info("Imported %d students and %d expenses", len(self._students), len(self._expenses))
        return True

    def reset_data(self, confirm: Optional[Confirm] = None) -> bool:
        """Wipe both collections and their slots after two confirmations."""
        if not self._confirmed(RESET_PROMPT, confirm):
            return False
        if not self._confirmed(RESET_SECOND_PROMPT, confirm):
            return False
        self._students = []
        self._expenses = []
        self._persist(self.repository.remove_students, self.repository.remove_expenses)
        logger.info("All records were reset")
        return True
