from __future__ import annotations

import csv
import io

from roster.services.export import CSV_HEADERS, render_csv, write_csv
from tests.conftest import make_employee


def test_render_csv_header_only_for_empty_view():
    assert render_csv([]) == "Name,Email,Phone,Department,Position\n"


def test_render_csv_keeps_view_order():
    view = [make_employee("2", name="Zoe"), make_employee("1", name="Amy")]

    rows = list(csv.reader(io.StringIO(render_csv(view))))

    assert rows[0] == CSV_HEADERS
    assert [row[0] for row in rows[1:]] == ["Zoe", "Amy"]
    assert rows[1] == ["Zoe", "jane.doe@example.com", "555-123-4567", "Engineering", "Software Engineer"]


def test_render_csv_quotes_embedded_commas():
    view = [make_employee(name="Doe, John", position='Lead "Ops"')]

    text = render_csv(view)
    rows = list(csv.reader(io.StringIO(text)))

    assert '"Doe, John"' in text
    assert rows[1][0] == "Doe, John"
    assert rows[1][4] == 'Lead "Ops"'


def test_write_csv_returns_row_count(tmp_path):
    out = tmp_path / "employees.csv"
    count = write_csv(iter([make_employee("1"), make_employee("2")]), out)

    assert count == 2
    assert len(out.read_text(encoding="utf-8").splitlines()) == 3
