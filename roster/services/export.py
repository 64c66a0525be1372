"""CSV export of the visible employee list."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from pathlib import Path

from roster.models.employee import EmployeeRecord

CSV_HEADERS = ["Name", "Email", "Phone", "Department", "Position"]


def render_csv(view: Iterable[EmployeeRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for record in view:
        writer.writerow([record.name, record.email, record.phone, record.department, record.position])
    return buffer.getvalue()


def write_csv(view: Iterable[EmployeeRecord], out: Path) -> int:
    """Write ``view`` to ``out`` and return the number of data rows."""
    rows = list(view)
    out.write_text(render_csv(rows), encoding="utf-8")
    return len(rows)
