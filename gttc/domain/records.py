"""Record types for students, payments and expenses, plus their JSON shape."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping

from gttc.core.utils import normalize_date

logger = logging.getLogger(__name__)

PAYMENT_METHODS = ("Cash", "Bkash", "Nagad", "Rocket", "Bank")

COURSES = (
    "Computer Office App",
    "Driving & Auto Mechanics",
    "Electrical Wiring",
    "Plumbing",
    "Graphics Design",
)

INCOME_CATEGORIES = (
    "Admission Fee",
    "Monthly Fee",
    "Registration Fee",
    "Exam Fee",
    "Certificate Fee",
    "Online Course",
    "Others",
)

EXPENSE_CATEGORIES = (
    "Office Rent",
    "Electricity Bill",
    "Internet Bill",
    "Teacher Salary",
    "Staff Salary",
    "Marketing",
    "Printing & Stationery",
    "Equipment Repair",
    "Tea & Entertainment",
    "Others",
)

ADMISSION_FEE_CATEGORY = INCOME_CATEGORIES[0]
DEFAULT_PAYMENT_CATEGORY = INCOME_CATEGORIES[1]


def _number(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class Payment:
    amount: float
    date: str
    method: str = "Cash"
    category: str = DEFAULT_PAYMENT_CATEGORY

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "date": self.date,
            "method": self.method,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Payment":
        return cls(
            amount=_number(data.get("amount")),
            date=normalize_date(data.get("date")),
            method=_text(data.get("method") or "Cash"),
            category=_text(data.get("category") or DEFAULT_PAYMENT_CATEGORY),
        )


@dataclass
class Student:
    id: str
    name: str
    mobile: str
    course: str
    fee: float
    admission_date: str
    payments: list[Payment] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "mobile": self.mobile,
            "course": self.course,
            "fee": self.fee,
            "admissionDate": self.admission_date,
            "payments": [payment.to_dict() for payment in self.payments],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        raw_payments = data.get("payments")
        if not isinstance(raw_payments, list):
            raw_payments = []
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            mobile=_text(data.get("mobile")),
            course=_text(data.get("course")),
            fee=_number(data.get("fee")),
            admission_date=normalize_date(data.get("admissionDate", data.get("admission_date"))),
            payments=[Payment.from_dict(item) for item in raw_payments if isinstance(item, Mapping)],
        )

    def with_payment(self, payment: Payment) -> "Student":
        """Copy of the student with one more payment at the end."""
        return replace(self, payments=[*self.payments, payment])


@dataclass
class Expense:
    id: str
    amount: float
    date: str
    category: str
    description: str = ""
    method: str = "Cash"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "date": self.date,
            "category": self.category,
            "description": self.description,
            "method": self.method,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Expense":
        return cls(
            id=_text(data.get("id")),
            amount=_number(data.get("amount")),
            date=normalize_date(data.get("date")),
            category=_text(data.get("category")),
            description=_text(data.get("description")),
            method=_text(data.get("method") or "Cash"),
        )


def students_from_list(items: Iterable[Any]) -> list[Student]:
    """Decode student objects, dropping entries that are not objects."""
    students = []
    for item in items:
        if isinstance(item, Student):
            students.append(item)
        elif isinstance(item, Mapping):
            students.append(Student.from_dict(item))
        else:
            logger.warning("Skipping student entry of type %s", type(item).__name__)
    return students


def expenses_from_list(items: Iterable[Any]) -> list[Expense]:
    """Decode expense objects, dropping entries that are not objects."""
    expenses = []
    for item in items:
        if isinstance(item, Expense):
            expenses.append(item)
        elif isinstance(item, Mapping):
            expenses.append(Expense.from_dict(item))
        else:
            logger.warning("Skipping expense entry of type %s", type(item).__name__)
    return expenses
