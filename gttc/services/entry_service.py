"""
Caller-side checks for the admission, payment and expense forms.

RecordsStore deliberately accepts whatever it is given; the checks the forms
perform before calling it live here.
"""

from __future__ import annotations

from typing import Any, Optional

from gttc.core.utils import normalize_date, today_iso
from gttc.domain.records import (
    COURSES,
    DEFAULT_PAYMENT_CATEGORY,
    EXPENSE_CATEGORIES,
    Expense,
    Payment,
    Student,
)
from gttc.services.records_service import RecordsStore


class EntryError(Exception):
    """Base class for rejected form submissions."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldError(EntryError):
    pass


class InvalidAmountError(EntryError):
    pass


class DuplicateStudentError(EntryError):
    pass


class StudentNotFoundError(EntryError):
    pass


def _amount(value: Any, *, default: Optional[float] = None) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _require(**fields: Any) -> None:
    for name, value in fields.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingFieldError(f"Field '{name}' is required")


class EntryService:
    """Validates form input and forwards it to the records store."""

    def __init__(self, store: RecordsStore) -> None:
        self.store = store

    def admit_student(
        self,
        *,
        student_id: str,
        name: str,
        mobile: str,
        fee: Any,
        course: str = COURSES[0],
        paid: Any = None,
        method: str = "Cash",
        admission_date: Any = None,
    ) -> str:
        _require(student_id=student_id, name=name, mobile=mobile, fee=fee)
        fee_value = _amount(fee)
        if fee_value is None or fee_value < 0:
            raise InvalidAmountError("Fee must be a non-negative number")
        student = Student(
            id=student_id.strip(),
            name=name,
            mobile=mobile,
            course=course,
            fee=fee_value,
            admission_date=normalize_date(admission_date) or today_iso(),
        )
        # an unparseable initial payment counts as nothing paid
        initial = _amount(paid, default=0.0) or 0.0
        result = self.store.add_student(student, initial, method)
        if result is None:
            raise DuplicateStudentError(f'ID "{student_id}" is already in use. Choose another ID.')
        return result

    def collect_payment(
        self,
        student_ref: str,
        amount: Any,
        *,
        method: str = "Cash",
        category: str = DEFAULT_PAYMENT_CATEGORY,
        date: Any = None,
    ) -> Student:
        """Record a fee payment; the id typed by the user is matched ignoring case."""
        student_id = self.store.resolve_student_id(student_ref)
        if student_id is None:
            raise StudentNotFoundError("Wrong ID. No student found with this ID.")
        value = _amount(amount)
        if value is None or value <= 0:
            raise InvalidAmountError("Enter a valid amount greater than 0.")
        payment = Payment(amount=value, date=normalize_date(date) or today_iso(), method=method, category=category)
        if not self.store.add_payment(student_id, payment):
            raise StudentNotFoundError("Wrong ID. No student found with this ID.")
        return self.store.find_student(student_id)

    def record_expense(
        self,
        amount: Any,
        description: str,
        *,
        category: str = EXPENSE_CATEGORIES[0],
        method: str = "Cash",
        date: Any = None,
    ) -> Expense:
        _require(amount=amount, description=description)
        value = _amount(amount)
        if value is None:
            raise InvalidAmountError("Amount must be a number")
        expense = Expense(
            id="",
            amount=value,
            date=normalize_date(date) or today_iso(),
            category=category,
            description=description,
            method=method,
        )
        return self.store.add_expense(expense)
