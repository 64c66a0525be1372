"""Tests for the roster CSV export script."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from roster.core.config import Settings
from roster.models.result import ServiceResult
from scripts.export_roster import export_roster, parse_args


def test_parse_args_defaults():
    args = parse_args([])

    assert args.search == ""
    assert args.department == "all"
    assert args.sort == "name"
    assert args.output is None
    assert args.verbose is False


def test_parse_args_all_options():
    args = parse_args(
        ["--search", "chen", "--department", "HR", "--sort", "department", "--output", "out.csv", "--verbose"]
    )

    assert args.search == "chen"
    assert args.department == "HR"
    assert args.sort == "department"
    assert args.output == Path("out.csv")
    assert args.verbose is True


def test_parse_args_rejects_unknown_department():
    with pytest.raises(SystemExit):
        parse_args(["--department", "Legal"])


@pytest.mark.anyio
async def test_export_roster_writes_filtered_csv(tmp_path, sample_employees, fast_settings):
    out = tmp_path / "roster.csv"
    args = parse_args(["--department", "Engineering", "--output", str(out)])

    with patch(
        "scripts.export_roster.RecordService.list_employees",
        new=AsyncMock(return_value=ServiceResult.success(sample_employees)),
    ):
        code = await export_roster(args, settings=fast_settings)

    assert code == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert lines[1].startswith("amanda Lee,")
    assert lines[2].startswith("Amy Chen,")


@pytest.mark.anyio
async def test_export_roster_fails_when_service_unreachable(tmp_path, fast_settings):
    out = tmp_path / "roster.csv"
    args = parse_args(["--output", str(out)])

    with patch(
        "scripts.export_roster.RecordService.list_employees",
        new=AsyncMock(return_value=ServiceResult.failure("connection refused")),
    ):
        code = await export_roster(args, settings=fast_settings)

    assert code == 1
    assert not out.exists()


@pytest.mark.anyio
async def test_export_roster_fails_without_service_url(tmp_path):
    out = tmp_path / "roster.csv"
    args = parse_args(["--output", str(out)])

    code = await export_roster(args, settings=Settings(RECORD_SERVICE_URL=""))

    assert code == 1
    assert not out.exists()
