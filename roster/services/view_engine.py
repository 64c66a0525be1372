"""Derives the visible, ordered employee list from the collection and query."""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence

from roster.models.directory import ALL_DEPARTMENTS, QueryParams, SortKey
from roster.models.employee import EmployeeRecord


def _collation_key(value: str | None) -> tuple[str, str]:
    text = unicodedata.normalize("NFKD", value or "")
    folded = "".join(ch for ch in text if not unicodedata.combining(ch)).casefold()
    return folded, value or ""


def matches_search(record: EmployeeRecord, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.lower()
    return (
        needle in (record.name or "").lower()
        or needle in (record.email or "").lower()
        or search_term in (record.phone or "")
    )


def matches_department(record: EmployeeRecord, department_filter: str) -> bool:
    return department_filter == ALL_DEPARTMENTS or record.department == department_filter


def derive_view(records: Sequence[EmployeeRecord], params: QueryParams) -> list[EmployeeRecord]:
    """Filter then stable-sort ``records``; the input sequence is left untouched."""
    filtered = [
        record
        for record in records
        if matches_search(record, params.search_term)
        and matches_department(record, params.department_filter)
    ]

    if params.sort_key is SortKey.DEPARTMENT:
        filtered.sort(key=lambda r: _collation_key(r.department))
    else:
        filtered.sort(key=lambda r: _collation_key(r.name))

    return filtered


def summarize(view: Sequence[EmployeeRecord], records: Sequence[EmployeeRecord]) -> str:
    return f"Showing {len(view)} of {len(records)} employees"
