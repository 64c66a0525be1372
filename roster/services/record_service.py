from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

import aiohttp
from pydantic import ValidationError

from roster.core.config import Settings
from roster.models.employee import EmployeeRecord
from roster.models.result import ServiceResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordServiceError(RuntimeError):
    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


_FAILURES = (aiohttp.ClientError, asyncio.TimeoutError, RecordServiceError, ValidationError)


class RecordService:
    """REST client for the employee record service.

    Every public call resolves to a ``ServiceResult``; transport errors,
    non-2xx answers and malformed payloads are logged and reported as
    failures, never raised.
    """

    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout = 10.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.RECORD_SERVICE_URL:
            logger.warning("Record service URL missing, RecordService not initialized")
            return

        self.base_url = settings.RECORD_SERVICE_URL.rstrip("/")
        self.timeout = settings.RECORD_SERVICE_TIMEOUT
        self.initialized = True
        logger.info("RecordService initialized (url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""

    async def list_employees(self) -> ServiceResult[list[EmployeeRecord]]:
        return await self._guarded("list employees", self._list())

    async def create_employee(self, record: EmployeeRecord) -> ServiceResult[EmployeeRecord]:
        return await self._guarded("create employee", self._create(record))

    async def get_employee(self, employee_id: str) -> ServiceResult[EmployeeRecord]:
        return await self._guarded(f"get employee {employee_id}", self._get(employee_id))

    async def update_employee(self, employee_id: str, record: EmployeeRecord) -> ServiceResult[EmployeeRecord]:
        return await self._guarded(f"update employee {employee_id}", self._update(employee_id, record))

    async def delete_employee(self, employee_id: str) -> ServiceResult[None]:
        return await self._guarded(f"delete employee {employee_id}", self._delete(employee_id))

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        try:
            await self._request("GET", "/employees")
            return True
        except Exception:
            logger.exception("RecordService connection check failed")
            return False

    async def _guarded(self, action: str, call: Awaitable[T]) -> ServiceResult[T]:
        try:
            value = await call
        except _FAILURES as err:
            logger.exception("Record service call failed: %s", action)
            return ServiceResult.failure(f"Failed to {action}: {err}")
        return ServiceResult.success(value)

    async def _list(self) -> list[EmployeeRecord]:
        body = await self._request("GET", "/employees")
        if body is None:
            return []
        if not isinstance(body, list):
            raise RecordServiceError(f"Unexpected employee list payload: {type(body).__name__}")
        return [EmployeeRecord.model_validate(item) for item in body]

    async def _create(self, record: EmployeeRecord) -> EmployeeRecord:
        body = await self._request("POST", "/employees", record.payload())
        if isinstance(body, dict):
            return EmployeeRecord.model_validate(body)
        # Plain acknowledgement: the service did not echo the stored record.
        logger.debug("Create acknowledged without a record body: %r", body)
        return record.model_copy()

    async def _get(self, employee_id: str) -> EmployeeRecord:
        body = await self._request("GET", f"/employees/{employee_id}")
        if not isinstance(body, dict):
            raise RecordServiceError(f"Employee {employee_id} not returned")
        return EmployeeRecord.model_validate(body)

    async def _update(self, employee_id: str, record: EmployeeRecord) -> EmployeeRecord:
        body = await self._request("PUT", f"/employees/{employee_id}", record.payload())
        if isinstance(body, dict):
            return EmployeeRecord.model_validate(body)
        logger.debug("Update acknowledged without a record body: %r", body)
        return record.model_copy(update={"id": employee_id})

    async def _delete(self, employee_id: str) -> None:
        await self._request("DELETE", f"/employees/{employee_id}")

    async def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> Any:
        if not self.initialized:
            raise RecordServiceError("RecordService not initialized")

        url = f"{self.base_url}{path}"
        headers = {"Content-Type": "application/json", "Accept": "application/json"}

        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.request(method, url, headers=headers, json=payload) as response:
                text = await response.text()
                if 200 <= response.status < 300:
                    return _decode(text)

                raise RecordServiceError(
                    f"{method} {path} failed: {response.status} - {text}",
                    status=response.status,
                )


def _decode(text: str) -> Any:
    if not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text