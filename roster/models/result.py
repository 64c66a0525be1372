"""Outcome of a record service call."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ServiceResult(BaseModel, Generic[T]):
    ok: bool
    value: T | None = None
    reason: str | None = None

    @classmethod
    def success(cls, value: T | None = None) -> ServiceResult[T]:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, reason: str) -> ServiceResult[T]:
        return cls(ok=False, reason=reason)
