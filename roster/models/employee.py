"""Employee record models shared by the directory client and the record service."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator


class Department(str, Enum):
    ENGINEERING = "Engineering"
    MEDICAL = "Medical"
    MARKETING = "Marketing"
    SALES = "Sales"
    HR = "HR"
    FINANCE = "Finance"
    OPERATIONS = "Operations"


DEPARTMENTS: list[str] = [d.value for d in Department]


class EmployeeRecord(BaseModel):
    """A roster entry. ``id`` stays empty until the record service assigns one."""

    id: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    department: str = Department.ENGINEERING.value
    position: str = ""

    @field_validator("id", "name", "email", "phone", "position", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        # The record service sends null for unset columns and numeric ids.
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("department", mode="before")
    @classmethod
    def _coerce_department(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, Department):
            return value.value
        return value

    def payload(self) -> dict[str, str]:
        """Body sent to the record service; the id travels in the URL."""
        return self.model_dump(exclude={"id"})
