from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.testclient import TestClient

from roster.core.config import Settings
from roster.main import app
from roster.models.employee import EmployeeRecord
from roster.models.result import ServiceResult
from roster.services.record_store import record_store


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    record_store.clear()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    record_store.clear()


@pytest.fixture
def fast_settings() -> Settings:
    return Settings(
        RECORD_SERVICE_URL="http://records.test/api/v1",
        NOTIFICATION_TTL_SECONDS=0.2,
        NAVIGATION_DELAY_SECONDS=0.1,
    )


def make_employee(employee_id: str = "", **overrides: str) -> EmployeeRecord:
    data = {
        "id": employee_id,
        "name": "Jane Doe",
        "email": "jane.doe@example.com",
        "phone": "555-123-4567",
        "department": "Engineering",
        "position": "Software Engineer",
    }
    data.update(overrides)
    return EmployeeRecord(**data)


@pytest.fixture
def sample_employees() -> list[EmployeeRecord]:
    return [
        make_employee("1", name="Zoe Walker", email="zoe@example.com", phone="5550001111", department="Sales"),
        make_employee("2", name="Amy Chen", email="amy.chen@example.com", phone="5550002222", department="Engineering"),
        make_employee("3", name="Marco Rossi", email="marco@corp.io", phone="5550003333", department="HR"),
        make_employee("4", name="amanda Lee", email="alee@example.com", phone="5550004444", department="Engineering"),
    ]


@pytest.fixture
def mock_service(sample_employees) -> MagicMock:
    service = MagicMock()
    service.list_employees = AsyncMock(return_value=ServiceResult.success(list(sample_employees)))
    service.get_employee = AsyncMock()
    service.create_employee = AsyncMock()
    service.update_employee = AsyncMock()
    service.delete_employee = AsyncMock(return_value=ServiceResult.success(None))
    return service
