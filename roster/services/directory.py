from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from roster.core.config import Settings, settings as default_settings
from roster.models.directory import (
    ALL_DEPARTMENTS,
    DirectoryState,
    FormState,
    ModalKind,
    ModalState,
    Notification,
    SortKey,
    ViewMode,
)
from roster.models.employee import DEPARTMENTS, EmployeeRecord
from roster.services.export import write_csv
from roster.services.modal import ModalCoordinator
from roster.services.notifications import NotificationScheduler
from roster.services.record_service import RecordService
from roster.services.validation import validate
from roster.services.view_engine import derive_view, summarize

logger = logging.getLogger(__name__)

ROOT_ROUTE = "/"
ADD_ROUTE = "/addEmployee"

EDITABLE_FIELDS = ("name", "email", "phone", "department", "position")


def editor_route(employee_id: str) -> str:
    return f"/editEmployee/{employee_id}"


def _log_navigation(route: str) -> None:
    logger.debug("Navigate to %s", route)


class DirectoryController:
    """Owns the directory state and is the only thing that mutates it.

    Records enter or leave the local collection only after the record
    service confirms the change. Every create, update, delete and export
    ends in exactly one notification; nothing is retried automatically.
    """

    def __init__(
        self,
        service: RecordService,
        navigate: Callable[[str], None] | None = None,
        settings: Settings | None = None,
        on_notification: Callable[[Notification | None], None] | None = None,
    ) -> None:
        settings = settings or default_settings
        self.service = service
        self.navigate = navigate or _log_navigation
        self.navigation_delay = settings.NAVIGATION_DELAY_SECONDS
        self.export_filename = settings.EXPORT_FILENAME

        self.state = DirectoryState()
        self.notifications = NotificationScheduler(
            ttl=settings.NOTIFICATION_TTL_SECONDS,
            on_change=on_notification,
        )
        self.modal = ModalCoordinator()
        self._pending_navigation: list[asyncio.TimerHandle] = []

    # -- derived state ----------------------------------------------------

    @property
    def records(self) -> list[EmployeeRecord]:
        return self.state.records

    @property
    def view(self) -> list[EmployeeRecord]:
        return derive_view(self.state.records, self.state.query)

    @property
    def summary(self) -> str:
        return summarize(self.view, self.state.records)

    @property
    def notification(self) -> Notification | None:
        return self.notifications.current

    @property
    def form(self) -> FormState:
        return self.state.form

    # -- list -------------------------------------------------------------

    async def load(self) -> bool:
        self.state.loading = True
        try:
            result = await self.service.list_employees()
        finally:
            self.state.loading = False

        if not result.ok:
            logger.warning("Employee list not refreshed: %s", result.reason)
            self.notifications.error("Failed to fetch employees")
            return False

        self.state.records = list(result.value or [])
        logger.info("Loaded %d employees", len(self.state.records))
        return True

    def set_search_term(self, search_term: str) -> None:
        self.state.query.search_term = search_term

    def set_department_filter(self, department: str) -> None:
        if department != ALL_DEPARTMENTS and department not in DEPARTMENTS:
            raise ValueError(f"Unknown department: {department}")
        self.state.query.department_filter = department

    def set_sort_key(self, sort_key: SortKey | str) -> None:
        self.state.query.sort_key = SortKey(sort_key)

    def set_view_mode(self, view_mode: ViewMode | str) -> None:
        self.state.query.view_mode = ViewMode(view_mode)

    async def export_csv(self, out: Path | None = None) -> bool:
        target = out or Path(self.export_filename)
        try:
            count = write_csv(self.view, target)
        except OSError:
            logger.exception("Failed to export employees to %s", target)
            self.notifications.error("Failed to export employees")
            return False

        logger.info("Exported %d employees to %s", count, target)
        self.notifications.success("Data exported successfully")
        return True

    # -- dialogs ----------------------------------------------------------

    def open_view(self, record: EmployeeRecord) -> ModalState:
        return self.modal.open_view(record)

    def open_delete_confirm(self, record: EmployeeRecord) -> ModalState:
        return self.modal.open_delete_confirm(record)

    def close_modal(self) -> ModalState:
        return self.modal.close()

    def edit_from_view(self) -> None:
        state = self.modal.state
        if state.kind is not ModalKind.VIEWING or state.record is None:
            raise RuntimeError("No employee is being viewed")
        self.modal.close()
        self.edit(state.record.id)

    async def delete_confirmed(self) -> bool:
        state = self.modal.state
        if state.kind is not ModalKind.CONFIRMING_DELETE or state.record is None:
            raise RuntimeError("Delete requires a pending confirmation")

        target_id = state.record.id
        result = await self.service.delete_employee(target_id)
        if not result.ok:
            # Dialog stays open so the user can retry or cancel.
            logger.warning("Employee %s not deleted: %s", target_id, result.reason)
            self.notifications.error("Failed to delete employee")
            return False

        self.state.records = [r for r in self.state.records if r.id != target_id]
        if self.modal.state == state:
            self.modal.close()
        self.notifications.success("Employee deleted successfully")
        return True

    # -- add / edit form --------------------------------------------------

    def begin_create(self) -> None:
        self.state.form = FormState()
        self.navigate(ADD_ROUTE)

    def edit(self, employee_id: str) -> None:
        self.navigate(editor_route(employee_id))

    def cancel_edit(self) -> None:
        self.navigate(ROOT_ROUTE)

    def update_field(self, field: str, value: str) -> None:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown employee field: {field}")
        if field == "department" and value not in DEPARTMENTS:
            raise ValueError(f"Unknown department: {value}")
        form = self.state.form
        setattr(form.draft, field, value)
        form.errors.pop(field, None)

    def reset_form(self) -> None:
        form = self.state.form
        form.draft = EmployeeRecord(id=form.editing_id or "")
        form.errors = {}

    async def begin_edit(self, employee_id: str) -> bool:
        form = FormState(
            draft=EmployeeRecord(id=employee_id),
            editing_id=employee_id,
            loading=True,
        )
        self.state.form = form

        result = await self.service.get_employee(employee_id)
        form.loading = False
        if not result.ok or result.value is None:
            logger.warning("Employee %s not loaded for editing: %s", employee_id, result.reason)
            form.load_failed = True
            self.notifications.error("Failed to fetch employee data")
            return False

        record = result.value
        form.draft = record if record.id else record.model_copy(update={"id": employee_id})
        return True

    async def create(self) -> bool:
        form = self.state.form
        if form.submitting:
            logger.debug("Create already in flight, ignoring resubmit")
            return False
        if not self._validate(form):
            return False

        form.submitting = True
        result = await self.service.create_employee(form.draft)
        if not result.ok or result.value is None:
            form.submitting = False
            self.notifications.error("Failed to add employee")
            return False

        created = result.value
        if created.id:
            self.state.records = [*self.state.records, created]
        self.notifications.success("Employee added successfully!")
        self._navigate_later(ROOT_ROUTE)
        return True

    async def update(self) -> bool:
        form = self.state.form
        if form.editing_id is None:
            raise RuntimeError("No employee is being edited")
        if form.submitting:
            logger.debug("Update of %s already in flight, ignoring resubmit", form.editing_id)
            return False
        if not self._validate(form):
            return False

        form.submitting = True
        result = await self.service.update_employee(form.editing_id, form.draft)
        if not result.ok or result.value is None:
            form.submitting = False
            self.notifications.error("Failed to update employee")
            return False

        updated = result.value
        if updated.id != form.editing_id:
            updated = updated.model_copy(update={"id": form.editing_id})
        self.state.records = [updated if r.id == form.editing_id else r for r in self.state.records]
        self.notifications.success("Employee updated successfully!")
        self._navigate_later(ROOT_ROUTE)
        return True

    # -- lifecycle --------------------------------------------------------

    def close(self) -> None:
        self.notifications.close()
        for handle in self._pending_navigation:
            handle.cancel()
        self._pending_navigation.clear()

    def _validate(self, form: FormState) -> bool:
        form.errors = validate(form.draft)
        if form.errors:
            logger.debug("Form rejected: %s", ", ".join(sorted(form.errors)))
            self.notifications.error("Please fix the errors in the form")
            return False
        return True

    def _navigate_later(self, route: str) -> None:
        loop = asyncio.get_running_loop()

        def _fire() -> None:
            self._pending_navigation.remove(handle)
            self.navigate(route)

        handle = loop.call_later(self.navigation_delay, _fire)
        self._pending_navigation.append(handle)
