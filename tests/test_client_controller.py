"""
Clients page controller tests: end-to-end user flows against an in-memory store.
"""

import pytest

from clientdesk.controllers.client_controller import ClientController
from clientdesk.core.exceptions import AppException, NotFoundError, ValidationFailedError
from clientdesk.models.client import ClientStatus
from clientdesk.schemas.page_state import DialogMode
from clientdesk.schemas.query import SortDirection, SortField
from clientdesk.services.client_service import ClientService


def _form(**overrides):
    values = {
        "name": "New Person",
        "email": "new@example.com",
        "phone": "",
        "company": "Newco",
        "status": "Active",
        "last_contact": "2024-02-01",
        "value": "2500",
        "notes": "",
    }
    values.update(overrides)
    return values


def test_initial_view_shows_first_page(controller):
    view = controller.get_view()

    assert [c.id for c in view.page.items] == list(range(1, 11))
    assert view.page.total == 15
    assert view.page.total_pages == 2
    assert view.dialog_mode == DialogMode.CLOSED
    assert view.selected is None
    assert not view.pending_delete.is_pending


def test_set_page_shows_second_page(controller):
    view = controller.set_page(2)

    assert [c.id for c in view.page.items] == list(range(11, 16))


def test_set_filters_resets_page(controller):
    controller.set_page(2)

    view = controller.set_filters(search="client 1")

    assert view.page.page == 1
    assert [c.name for c in view.page.items] == [
        "Client 10", "Client 11", "Client 12",
        "Client 13", "Client 14", "Client 15",
    ]


def test_status_filter_all_means_no_constraint(controller):
    view = controller.set_filters(status="all")

    assert view.filters.status is None
    assert view.page.total == 15


def test_set_sort_toggles_and_resets_page(controller):
    controller.set_page(2)

    view = controller.set_sort("value")
    assert view.page.page == 1
    assert view.sort.direction == SortDirection.ASC
    assert view.page.items[0].value == 100

    view = controller.set_sort(SortField.VALUE)
    assert view.sort.direction == SortDirection.DESC
    assert view.page.items[0].value == 1500


def test_select_client_opens_edit_dialog_with_form(controller):
    view = controller.select_client(3)

    assert view.dialog_mode == DialogMode.EDITING
    assert view.selected.id == 3
    assert view.form.name == "Client 03"
    assert view.form.last_contact == "2024-01-15"
    assert view.navigation.can_navigate_prev
    assert view.navigation.can_navigate_next


def test_select_none_opens_create_dialog_with_blank_form(controller):
    view = controller.select_client(None)

    assert view.dialog_mode == DialogMode.CREATING
    assert view.selected is None
    assert view.form.name == ""
    assert view.form.status == ClientStatus.PROSPECT
    assert view.form.value == 0
    assert not view.navigation.can_navigate_prev
    assert not view.navigation.can_navigate_next


def test_select_missing_client_raises(controller):
    with pytest.raises(NotFoundError):
        controller.select_client(99)

    assert controller.get_view().dialog_mode == DialogMode.CLOSED


def test_navigate_follows_filtered_and_sorted_order(controller):
    controller.set_sort("value")
    controller.set_sort("value")  # descending: ids 15, 14, ..., 1
    controller.select_client(15)

    view = controller.get_view()
    assert not view.navigation.can_navigate_prev
    assert view.navigation.can_navigate_next

    view = controller.navigate("prev")
    assert view.selected.id == 15

    view = controller.navigate("next")
    assert view.selected.id == 14
    assert view.navigation.index == 1


def test_navigate_crosses_page_boundary(controller):
    controller.select_client(10)

    view = controller.navigate("next")

    assert view.selected.id == 11


def test_navigate_at_last_is_noop(controller):
    controller.select_client(15)

    view = controller.navigate("next")

    assert view.selected.id == 15
    assert not view.navigation.can_navigate_next


def test_navigation_availability_recomputed_after_filter_change(controller):
    controller.select_client(12)
    assert controller.get_view().navigation.can_navigate_next

    view = controller.set_filters(search="client 12")

    assert view.navigation.index == 0
    assert not view.navigation.can_navigate_prev
    assert not view.navigation.can_navigate_next


def test_save_in_create_mode_adds_client_and_closes(controller):
    controller.select_client(None)

    created = controller.save(_form())

    assert created.id == 16
    assert created.value == 2500
    assert created.status == ClientStatus.ACTIVE
    view = controller.get_view()
    assert view.dialog_mode == DialogMode.CLOSED
    assert view.page.total == 16


def test_save_in_edit_mode_updates_client(controller):
    controller.select_client(4)

    updated = controller.save(_form(name="Renamed", value="abc"))

    assert updated.id == 4
    assert updated.name == "Renamed"
    assert updated.value == 0
    assert controller.client_service.get_client(4).name == "Renamed"
    assert controller.get_view().dialog_mode == DialogMode.CLOSED


def test_save_with_missing_required_fields_keeps_dialog_open(controller):
    controller.select_client(None)

    with pytest.raises(ValidationFailedError) as exc_info:
        controller.save(_form(name="", email=""))

    assert exc_info.value.fields == ["name", "email"]
    assert controller.get_view().dialog_mode == DialogMode.CREATING
    assert controller.get_view().page.total == 15


def test_save_when_dialog_closed_raises(controller):
    with pytest.raises(AppException) as exc_info:
        controller.save(_form())

    assert exc_info.value.code == "dialog_closed"


def test_save_edit_of_deleted_client_raises_not_found(controller):
    controller.select_client(5)
    controller.client_service.delete_client(5)

    with pytest.raises(NotFoundError):
        controller.save(_form())


def test_cancel_edit_leaves_store_untouched(controller):
    controller.select_client(2)

    view = controller.cancel_edit()

    assert view.dialog_mode == DialogMode.CLOSED
    assert controller.client_service.get_client(2).name == "Client 02"


def test_delete_flow_confirm(controller):
    view = controller.request_delete(3)
    assert view.pending_delete.client_id == 3
    assert view.pending_delete.client_name == "Client 03"

    view = controller.confirm_delete()

    assert not view.pending_delete.is_pending
    assert view.page.total == 14
    assert controller.client_service.get_client(3) is None


def test_delete_flow_cancel(controller):
    controller.request_delete(3)

    view = controller.cancel_delete()

    assert not view.pending_delete.is_pending
    assert view.page.total == 15


def test_confirm_delete_of_already_deleted_client_still_closes(controller):
    controller.request_delete(3)
    controller.client_service.delete_client(3)

    view = controller.confirm_delete()

    assert not view.pending_delete.is_pending
    assert view.page.total == 14


def test_confirm_delete_without_pending_is_noop(controller):
    view = controller.confirm_delete()

    assert view.page.total == 15


def test_confirm_delete_closes_dialog_editing_that_client(controller):
    controller.select_client(6)
    controller.request_delete(6)

    view = controller.confirm_delete()

    assert view.dialog_mode == DialogMode.CLOSED
    assert view.selected is None


def test_deleting_last_item_on_page_leaves_page_unclamped(controller):
    for client_id in range(11, 16):
        controller.delete_client(client_id)
    view = controller.set_page(2)

    assert view.page.items == []
    assert view.page.total_pages == 1


def test_create_into_empty_store_assigns_id_1(client_repo, make_client_data):
    controller = ClientController(ClientService(client_repo))

    created = controller.create_client(make_client_data())

    assert created.id == 1
    assert controller.get_view().page.total == 1


def test_empty_store_view(client_repo):
    view = ClientController(ClientService(client_repo)).get_view()

    assert view.page.items == []
    assert view.page.total == 0
    assert view.page.total_pages == 1


def test_update_and_delete_through_controller(controller, make_client_data):
    updated = controller.update_client(1, make_client_data(name="Direct"))
    controller.delete_client(2)

    assert updated.name == "Direct"
    assert controller.get_view().page.total == 14
    with pytest.raises(NotFoundError):
        controller.update_client(2, make_client_data())


def test_delete_client_open_for_editing_closes_dialog(controller):
    controller.select_client(3)

    controller.delete_client(3)

    view = controller.get_view()
    assert view.dialog_mode == DialogMode.CLOSED
    assert view.selected is None
    assert view.form is None
    with pytest.raises(AppException):
        controller.save(_form())


def test_delete_client_pending_confirmation_clears_it(controller):
    controller.request_delete(4)

    controller.delete_client(4)

    assert not controller.get_view().pending_delete.is_pending


def test_delete_other_client_keeps_dialog_and_confirmation(controller):
    controller.select_client(3)
    controller.request_delete(4)

    controller.delete_client(5)

    view = controller.get_view()
    assert view.dialog_mode == DialogMode.EDITING
    assert view.selected.id == 3
    assert view.pending_delete.client_id == 4


def test_set_filters_with_unknown_status_raises_validation_failed(controller):
    controller.set_filters(search="client")

    with pytest.raises(ValidationFailedError) as exc_info:
        controller.set_filters(status="Bogus")

    assert exc_info.value.fields == ["status"]
    assert controller.get_view().filters.search == "client"
