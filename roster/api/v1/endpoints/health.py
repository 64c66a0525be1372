from __future__ import annotations

from fastapi import APIRouter, Depends

from roster.core.config import settings
from roster.core.dependencies import get_record_store
from roster.services.record_store import RecordStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(store: RecordStore = Depends(get_record_store)):  # noqa: B008
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "services": {"record_store": "ok"},
        "employees": len(store),
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
