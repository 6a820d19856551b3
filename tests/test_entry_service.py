from __future__ import annotations

import pytest

from gttc.services.entry_service import (
    DuplicateStudentError,
    EntryService,
    InvalidAmountError,
    MissingFieldError,
    StudentNotFoundError,
)


@pytest.fixture()
def entries(store):
    return EntryService(store)


def _admit(entries, student_id="CTT-101", **extra):
    fields = dict(student_id=student_id, name="Rahim", mobile="01711000000", fee="5000", admission_date="2026-01-10")
    fields.update(extra)
    return entries.admit_student(**fields)


def test_admission_trims_id_and_parses_numbers(entries, store):
    assert _admit(entries, student_id="  CTT-101 ", paid="1500", method="Bkash") == "CTT-101"
    student = store.find_student("CTT-101")
    assert student.fee == 5000
    assert student.payments[0].amount == 1500
    assert student.payments[0].method == "Bkash"


def test_admission_without_paid_amount(entries, store):
    _admit(entries, paid="")
    assert store.find_student("CTT-101").payments == []


def test_admission_duplicate(entries):
    _admit(entries)
    with pytest.raises(DuplicateStudentError) as exc:
        _admit(entries, student_id="ctt-101")
    assert "ctt-101" in exc.value.message


def test_admission_requires_fields(entries):
    with pytest.raises(MissingFieldError):
        _admit(entries, name=" ")
    with pytest.raises(InvalidAmountError):
        _admit(entries, fee="abc")


def test_collect_payment_resolves_id_ignoring_case(entries, store):
    _admit(entries)
    student = entries.collect_payment(" ctt-101", "700", method="Nagad", date="2026-02-01")

    assert student.id == "CTT-101"
    assert [(p.amount, p.category) for p in student.payments] == [(700, "Monthly Fee")]


def test_collect_payment_rejects_unknown_student(entries):
    with pytest.raises(StudentNotFoundError):
        entries.collect_payment("CTT-404", 100)


@pytest.mark.parametrize("amount", ["0", "-5", "abc", None])
def test_collect_payment_rejects_bad_amounts(entries, store, amount):
    _admit(entries)
    with pytest.raises(InvalidAmountError):
        entries.collect_payment("CTT-101", amount)
    assert store.find_student("CTT-101").payments == []


def test_record_expense(entries, store):
    expense = entries.record_expense("250.5", "Printer ink", category="Printing & Stationery", date="2026-01-15")
    assert store.expenses == [expense]
    assert expense.amount == 250.5


def test_record_expense_requires_description(entries, store):
    with pytest.raises(MissingFieldError):
        entries.record_expense("100", "")
    assert store.expenses == []
