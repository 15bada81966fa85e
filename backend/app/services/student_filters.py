"""Derives the visible student list from search text and a status filter."""

from typing import Iterable

from backend.app.schemas.student import StatusFilter, StudentRecord


def matches_search(record: StudentRecord, search: str) -> bool:
    needle = search.lower()
    if not needle:
        return True
    return any(
        needle in field.lower()
        for field in (record.name, record.email, record.invoice_number, record.course)
    )


def matches_status(record: StudentRecord, status: StatusFilter) -> bool:
    if status == "all":
        return True
    if status == "paid":
        return record.is_paid
    return not record.is_paid


def filter_students(records: Iterable[StudentRecord], search: str = "", status: StatusFilter = "all") -> list[StudentRecord]:
    """Newest first; records added at the same instant keep their stored order."""
    visible = [r for r in records if matches_search(r, search) and matches_status(r, status)]
    return sorted(visible, key=lambda r: r.date_added, reverse=True)
