"""Financial figures derived from the student and expense collections.

Everything here is a pure function of its inputs. Nothing is cached; callers
recompute on every read.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from gttc.core.utils import normalize_date, today_iso
from gttc.domain.records import Expense, Student


@dataclass(frozen=True)
class Summary:
    student_count: int
    total_fee: float
    total_income: float
    total_expense: float
    total_due: float
    net_profit: float
    daily_income: float
    daily_expense: float

    @property
    def daily_cash(self) -> float:
        return self.daily_income - self.daily_expense


def student_paid(student: Student) -> float:
    return sum(payment.amount for payment in student.payments)


def student_due(student: Student) -> float:
    """Outstanding fee for one student, never below zero."""
    return max(0.0, student.fee - student_paid(student))


def is_paid_in_full(student: Student) -> bool:
    return student.fee - student_paid(student) <= 0


def summarize(
    students: Iterable[Student],
    expenses: Iterable[Expense],
    today: Optional[str] = None,
) -> Summary:
    """
    Totals over both collections. The aggregate due is fee minus income and is
    not clamped, so overpayment shows up as a negative figure.
    """
    day = normalize_date(today) if today else today_iso()
    count = 0
    total_fee = 0.0
    total_income = 0.0
    daily_income = 0.0
    for student in students:
        count += 1
        total_fee += student.fee
        for payment in student.payments:
            total_income += payment.amount
            if payment.date == day:
                daily_income += payment.amount

    total_expense = 0.0
    daily_expense = 0.0
    for expense in expenses:
        total_expense += expense.amount
        if expense.date == day:
            daily_expense += expense.amount

    return Summary(
        student_count=count,
        total_fee=total_fee,
        total_income=total_income,
        total_expense=total_expense,
        total_due=total_fee - total_income,
        net_profit=total_income - total_expense,
        daily_income=daily_income,
        daily_expense=daily_expense,
    )


def chart_series(summary: Summary) -> list[dict]:
    """Rows for the income/expense/profit bar chart."""
    return [
        {"name": "Total Income", "value": summary.total_income},
        {"name": "Total Expense", "value": summary.total_expense},
        {"name": "Net Profit", "value": summary.net_profit},
    ]
