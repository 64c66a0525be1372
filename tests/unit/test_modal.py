from __future__ import annotations

import pytest
from pydantic import ValidationError

from roster.models.directory import ModalKind, ModalState
from roster.services.modal import ModalCoordinator
from tests.conftest import make_employee


def test_starts_closed():
    modal = ModalCoordinator()
    assert modal.state == ModalState.none()
    assert modal.kind is ModalKind.NONE
    assert modal.record is None
    assert not modal.state.is_open


def test_open_view_then_close():
    modal = ModalCoordinator()
    record = make_employee("1")

    modal.open_view(record)
    assert modal.kind is ModalKind.VIEWING
    assert modal.record == record
    assert modal.state.is_open

    modal.close()
    assert modal.kind is ModalKind.NONE
    assert modal.record is None


def test_switching_from_view_to_delete_confirm_is_direct():
    modal = ModalCoordinator()
    x = make_employee("1", name="X")
    y = make_employee("2", name="Y")
    modal.open_view(x)

    observed = []
    original = modal._transition

    def spy(target):
        observed.append(target.kind)
        return original(target)

    modal._transition = spy
    state = modal.open_delete_confirm(y)

    assert observed == [ModalKind.CONFIRMING_DELETE]
    assert state == ModalState.confirming_delete(y)
    assert modal.record == y


def test_switching_from_delete_confirm_to_view():
    modal = ModalCoordinator()
    modal.open_delete_confirm(make_employee("1"))

    modal.open_view(make_employee("2"))

    assert modal.kind is ModalKind.VIEWING
    assert modal.record.id == "2"


def test_close_is_idempotent():
    modal = ModalCoordinator()
    assert modal.close() == ModalState.none()
    assert modal.close() == ModalState.none()

    modal.open_delete_confirm(make_employee("1"))
    modal.close()
    modal.close()
    assert modal.kind is ModalKind.NONE


def test_modal_state_is_immutable():
    state = ModalState.viewing(make_employee("1"))
    with pytest.raises(ValidationError):
        state.kind = ModalKind.NONE
    assert state.kind is ModalKind.VIEWING
