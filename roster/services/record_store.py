"""In-memory employee store behind the reference record service."""

from __future__ import annotations

import itertools
import logging

from roster.models.employee import EmployeeRecord

logger = logging.getLogger(__name__)


class RecordStore:
    def __init__(self) -> None:
        self._records: dict[str, EmployeeRecord] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> list[EmployeeRecord]:
        return list(self._records.values())

    def get(self, employee_id: str) -> EmployeeRecord | None:
        return self._records.get(employee_id)

    def create(self, data: EmployeeRecord) -> EmployeeRecord:
        employee_id = str(next(self._ids))
        record = data.model_copy(update={"id": employee_id})
        self._records[employee_id] = record
        logger.info("Created employee %s", employee_id)
        return record

    def update(self, employee_id: str, data: EmployeeRecord) -> EmployeeRecord | None:
        if employee_id not in self._records:
            return None
        record = data.model_copy(update={"id": employee_id})
        self._records[employee_id] = record
        logger.info("Updated employee %s", employee_id)
        return record

    def delete(self, employee_id: str) -> bool:
        if self._records.pop(employee_id, None) is None:
            return False
        logger.info("Deleted employee %s", employee_id)
        return True

    def clear(self) -> None:
        self._records.clear()
        self._ids = itertools.count(1)


record_store = RecordStore()
