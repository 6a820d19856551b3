"""Search helpers for the student and expense lists."""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from gttc.domain.records import Expense, Student


def find_student_insensitive(students: Iterable[Student], value: str | None) -> Optional[Student]:
    """Match a typed-in id against stored ids ignoring case and surrounding spaces."""
    needle = (value or "").strip().lower()
    if not needle:
        return None
    for student in students:
        if student.id.lower() == needle:
            return student
    return None


def search_students(students: Iterable[Student], term: str | None) -> list[Student]:
    """Filter by name or id (case-insensitive) or by a mobile number fragment."""
    raw = term or ""
    needle = raw.lower()
    return [
        s
        for s in students
        if needle in s.name.lower() or raw in s.mobile or needle in s.id.lower()
    ]


def search_expenses(expenses: Iterable[Expense], term: str | None) -> list[Expense]:
    needle = (term or "").lower()
    return [e for e in expenses if needle in e.category.lower() or needle in e.description.lower()]


def recent_students(students: Sequence[Student], limit: int = 5) -> list[Student]:
    # students are stored oldest first
    return list(reversed(students))[:limit]
