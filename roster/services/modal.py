from __future__ import annotations

import logging

from roster.models.directory import ModalKind, ModalState
from roster.models.employee import EmployeeRecord

logger = logging.getLogger(__name__)


class ModalCoordinator:
    """Keeps the detail view and the delete confirmation mutually exclusive."""

    def __init__(self) -> None:
        self._state = ModalState.none()

    @property
    def state(self) -> ModalState:
        return self._state

    @property
    def kind(self) -> ModalKind:
        return self._state.kind

    @property
    def record(self) -> EmployeeRecord | None:
        return self._state.record

    def open_view(self, record: EmployeeRecord) -> ModalState:
        return self._transition(ModalState.viewing(record))

    def open_delete_confirm(self, record: EmployeeRecord) -> ModalState:
        return self._transition(ModalState.confirming_delete(record))

    def close(self) -> ModalState:
        return self._transition(ModalState.none())

    def _transition(self, target: ModalState) -> ModalState:
        # Single assignment: switching dialogs never passes through "none".
        if self._state.kind is not target.kind:
            logger.debug("Modal %s -> %s", self._state.kind.value, target.kind.value)
        self._state = target
        return target
