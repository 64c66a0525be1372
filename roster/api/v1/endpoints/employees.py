from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from roster.core.dependencies import get_record_store
from roster.models.employee import EmployeeRecord
from roster.services.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _not_found(employee_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Employee with id '{employee_id}' not found",
    )


@router.get("", response_model=list[EmployeeRecord])
async def list_employees(store: RecordStore = Depends(get_record_store)):  # noqa: B008
    return store.list()


@router.get("/{employee_id}", response_model=EmployeeRecord)
async def get_employee(
    employee_id: str,
    store: RecordStore = Depends(get_record_store),  # noqa: B008
):
    employee = store.get(employee_id)
    if not employee:
        raise _not_found(employee_id)
    return employee


@router.post("", response_model=EmployeeRecord, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee: EmployeeRecord,
    store: RecordStore = Depends(get_record_store),  # noqa: B008
):
    return store.create(employee)


@router.put("/{employee_id}", response_model=EmployeeRecord)
async def update_employee(
    employee_id: str,
    employee: EmployeeRecord,
    store: RecordStore = Depends(get_record_store),  # noqa: B008
):
    updated = store.update(employee_id, employee)
    if not updated:
        raise _not_found(employee_id)
    return updated


@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: str,
    store: RecordStore = Depends(get_record_store),  # noqa: B008
):
    if not store.delete(employee_id):
        logger.warning("Delete requested for unknown employee %s", employee_id)
        raise _not_found(employee_id)
    return {"deleted": employee_id}
