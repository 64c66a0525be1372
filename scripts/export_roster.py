#!/usr/bin/env python3
"""Export the employee roster to CSV.

Fetches every employee from the record service, applies the same search,
department filter and sort order as the directory screen, and writes the
visible rows. Run from the repository root:

    python3 scripts/export_roster.py [--search TEXT] [--department NAME]
                                     [--sort name|department] [--output FILE]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from roster.core.config import Settings  # noqa: E402
from roster.models.directory import ALL_DEPARTMENTS, SortKey  # noqa: E402
from roster.models.employee import DEPARTMENTS  # noqa: E402
from roster.services.directory import DirectoryController  # noqa: E402
from roster.services.record_service import RecordService  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export the employee roster (filtered and sorted) to CSV",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Only include employees whose name, email or phone contains TEXT",
    )
    parser.add_argument(
        "--department",
        default=ALL_DEPARTMENTS,
        choices=[ALL_DEPARTMENTS, *DEPARTMENTS],
        help="Only include one department (default: all)",
    )
    parser.add_argument(
        "--sort",
        default=SortKey.NAME.value,
        choices=[key.value for key in SortKey],
        help="Sort order (default: name)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output file (default: EXPORT_FILENAME setting)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def export_roster(args: argparse.Namespace, settings: Settings | None = None) -> int:
    settings = settings or Settings()
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    service = RecordService()
    await service.initialize(settings)
    controller = DirectoryController(service, settings=settings)
    try:
        logger.info("Fetching employees from %s...", settings.RECORD_SERVICE_URL)
        if not await controller.load():
            logger.error("Could not fetch employees. Exiting.")
            return 1

        controller.set_search_term(args.search)
        controller.set_department_filter(args.department)
        controller.set_sort_key(args.sort)
        logger.info(controller.summary)

        output = args.output or Path(settings.EXPORT_FILENAME)
        if not await controller.export_csv(output):
            return 1
        return 0
    finally:
        controller.close()
        await service.close()


def main(argv: list[str] | None = None) -> int:
    return asyncio.run(export_roster(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
