"""
Page state transitions.
Each function takes the current PageState and returns the next one.
"""

from typing import Optional, Sequence

from clientdesk.schemas.client import ClientResponse
from clientdesk.schemas.page_state import (
    DeleteDialogState,
    DialogMode,
    EditDialogState,
    NavigationDirection,
    PageState,
)
from clientdesk.schemas.query import ClientFilters, SortDirection, SortField, SortSpec
from clientdesk.services.navigation_service import neighbor_id


def open_dialog(state: PageState, client_id: Optional[int]) -> PageState:
    """Open the edit dialog on a client, or in create mode when ``client_id`` is None."""
    if client_id is None:
        edit = EditDialogState(mode=DialogMode.CREATING)
    else:
        edit = EditDialogState(mode=DialogMode.EDITING, client_id=client_id)
    return state.model_copy(update={"edit": edit})


def close_dialog(state: PageState) -> PageState:
    return state.model_copy(update={"edit": EditDialogState()})


def set_filters(state: PageState, filters: ClientFilters) -> PageState:
    """Replace the filters and go back to the first page."""
    return state.model_copy(update={"filters": filters, "page": 1})


def next_sort(current: SortSpec, field: SortField) -> SortSpec:
    """Same field flips the direction; any other field starts ascending."""
    if field == current.field:
        return SortSpec(field=field, direction=current.direction.toggled())
    return SortSpec(field=field, direction=SortDirection.ASC)


def set_sort(state: PageState, field: SortField) -> PageState:
    """Apply a sort header click and go back to the first page."""
    return state.model_copy(update={"sort": next_sort(state.sort, field), "page": 1})


def set_page(state: PageState, page: int) -> PageState:
    return state.model_copy(update={"page": page})


def navigate(
    state: PageState,
    ordered: Sequence[ClientResponse],
    direction: NavigationDirection,
) -> PageState:
    """
    Move the edited client to its neighbour in ``ordered``.

    ``ordered`` must be the current filtered and sorted list. Nothing changes
    when the dialog is not editing or the selection is at that end of the list.
    """
    if state.edit.mode != DialogMode.EDITING:
        return state

    target = neighbor_id(ordered, state.edit.client_id, direction)
    if target is None:
        return state
    return open_dialog(state, target)


def request_delete(state: PageState, client: ClientResponse) -> PageState:
    """Ask for confirmation before deleting ``client``."""
    pending = DeleteDialogState(client_id=client.id, client_name=client.name)
    return state.model_copy(update={"delete": pending})


def clear_delete(state: PageState) -> PageState:
    return state.model_copy(update={"delete": DeleteDialogState()})


def forget_client(state: PageState, client_id: int) -> PageState:
    """Drop every reference to a deleted client: its edit dialog and its pending delete."""
    if state.edit.client_id == client_id:
        state = close_dialog(state)
    if state.delete.client_id == client_id:
        state = clear_delete(state)
    return state
