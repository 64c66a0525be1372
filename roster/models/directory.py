"""UI state owned by the directory controller."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from roster.models.employee import EmployeeRecord

ALL_DEPARTMENTS = "all"


class SortKey(str, Enum):
    NAME = "name"
    DEPARTMENT = "department"


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"


class QueryParams(BaseModel):
    search_term: str = ""
    department_filter: str = ALL_DEPARTMENTS
    sort_key: SortKey = SortKey.NAME
    # Presentation only, never consulted when deriving the view.
    view_mode: ViewMode = ViewMode.GRID


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    message: str
    kind: NotificationKind = NotificationKind.SUCCESS
    created_at: float
    expires_at: float


class ModalKind(str, Enum):
    NONE = "none"
    VIEWING = "viewing"
    CONFIRMING_DELETE = "confirming_delete"


class ModalState(BaseModel):
    """Which dialog is open, if any. ``record`` is set iff a dialog is open."""

    model_config = {"frozen": True}

    kind: ModalKind = ModalKind.NONE
    record: EmployeeRecord | None = None

    @classmethod
    def none(cls) -> ModalState:
        return cls()

    @classmethod
    def viewing(cls, record: EmployeeRecord) -> ModalState:
        return cls(kind=ModalKind.VIEWING, record=record)

    @classmethod
    def confirming_delete(cls, record: EmployeeRecord) -> ModalState:
        return cls(kind=ModalKind.CONFIRMING_DELETE, record=record)

    @property
    def is_open(self) -> bool:
        return self.kind is not ModalKind.NONE


class FormState(BaseModel):
    draft: EmployeeRecord = Field(default_factory=EmployeeRecord)
    errors: dict[str, str] = Field(default_factory=dict)
    editing_id: str | None = None
    submitting: bool = False
    loading: bool = False
    load_failed: bool = False


class DirectoryState(BaseModel):
    records: list[EmployeeRecord] = Field(default_factory=list)
    query: QueryParams = Field(default_factory=QueryParams)
    loading: bool = False
    form: FormState = Field(default_factory=FormState)
