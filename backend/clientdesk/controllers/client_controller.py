"""
Client controller.
Entry point for the presentation layer: every user intent on the clients page
goes through one of these methods, and get_view() returns what to render.
"""

from typing import Optional, Union

from pydantic import ValidationError

from clientdesk.controllers.base_controller import BaseController
from clientdesk.core.exceptions import AppException, NotFoundError, ValidationFailedError
from clientdesk.core.logging import get_logger
from clientdesk.schemas.client import ClientCreate, ClientForm, ClientResponse
from clientdesk.schemas.page_state import (
    ClientsPageView,
    DialogMode,
    NavigationDirection,
    PageState,
)
from clientdesk.schemas.query import ClientFilters, SortField
from clientdesk.services import page_state_service, query_service
from clientdesk.services.client_service import ClientService
from clientdesk.services.navigation_service import navigation_state
from clientdesk.utils.client_form import blank_form, form_from_client, form_to_client_create

logger = get_logger(__name__)


class ClientController(BaseController):
    """Controller for the clients page."""

    def __init__(self, client_service: ClientService, state: Optional[PageState] = None):
        self.client_service = client_service
        self.state = state or PageState()

    # Record operations

    def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        return self.client_service.create_client(client_data)

    def update_client(self, client_id: int, client_data: ClientCreate) -> ClientResponse:
        """Replace a client's fields."""
        return self.client_service.update_client(client_id, client_data)

    def delete_client(self, client_id: int) -> None:
        """Delete a client and close any dialog that refers to it."""
        self.client_service.delete_client(client_id)
        self.state = page_state_service.forget_client(self.state, client_id)

    # List controls

    def set_filters(
        self,
        search: str = "",
        status: Optional[str] = None,
        company: str = "",
    ) -> ClientsPageView:
        """
        Apply filter values; the list returns to page 1.

        Raises:
            ValidationFailedError: If the status is not a known client status
        """
        try:
            filters = ClientFilters(search=search, status=status, company=company)
        except ValidationError as exc:
            raise ValidationFailedError.from_validation_error(exc) from exc
        self.state = page_state_service.set_filters(self.state, filters)
        return self.get_view()

    def set_sort(self, field: Union[SortField, str]) -> ClientsPageView:
        """Sort by a column; choosing the current column flips the direction."""
        self.state = page_state_service.set_sort(self.state, SortField(field))
        return self.get_view()

    def set_page(self, page: int) -> ClientsPageView:
        self.state = page_state_service.set_page(self.state, page)
        return self.get_view()

    # Edit dialog

    def select_client(self, client_id: Optional[int]) -> ClientsPageView:
        """Open the edit dialog on a client, or for a new client when ``client_id`` is None."""
        if client_id is not None:
            self.client_service.require_client(client_id)
        self.state = page_state_service.open_dialog(self.state, client_id)
        return self.get_view()

    def navigate(self, direction: Union[NavigationDirection, str]) -> ClientsPageView:
        """Move the edit dialog to the previous or next client in the current list."""
        ordered = self.client_service.ordered_clients(self.state.filters, self.state.sort)
        self.state = page_state_service.navigate(
            self.state, ordered, NavigationDirection(direction)
        )
        return self.get_view()

    def save(self, form: Union[ClientForm, dict]) -> ClientResponse:
        """
        Submit the edit dialog.

        Creates or updates depending on the dialog mode, then closes it.

        Raises:
            ValidationFailedError: If required fields are empty; the dialog stays open
            NotFoundError: If the edited client no longer exists
        """
        edit = self.state.edit
        if not edit.is_open:
            raise AppException("Client dialog is not open", code="dialog_closed")

        client_data = form_to_client_create(form)
        if edit.mode == DialogMode.EDITING:
            client = self.client_service.update_client(edit.client_id, client_data)
        else:
            client = self.client_service.create_client(client_data)

        self.state = page_state_service.close_dialog(self.state)
        return client

    def cancel_edit(self) -> ClientsPageView:
        """Close the edit dialog without touching the store."""
        self.state = page_state_service.close_dialog(self.state)
        return self.get_view()

    # Delete confirmation

    def request_delete(self, client_id: int) -> ClientsPageView:
        """Ask for confirmation before deleting a client."""
        client = self.client_service.require_client(client_id)
        self.state = page_state_service.request_delete(self.state, client)
        return self.get_view()

    def confirm_delete(self) -> ClientsPageView:
        """Delete the pending client; the confirmation always closes."""
        pending = self.state.delete
        if not pending.is_pending:
            return self.get_view()

        try:
            self.client_service.delete_client(pending.client_id)
        except NotFoundError as exc:
            logger.warning(
                f"Delete confirmed for missing client: {exc.message}",
                extra={"client_id": pending.client_id},
            )

        self.state = page_state_service.forget_client(self.state, pending.client_id)
        return self.get_view()

    def cancel_delete(self) -> ClientsPageView:
        self.state = page_state_service.clear_delete(self.state)
        return self.get_view()

    # Output

    def get_view(self) -> ClientsPageView:
        """Recompute everything the page renders from the store and current state."""
        state = self.state
        ordered = self.client_service.ordered_clients(state.filters, state.sort)
        page = query_service.paginate(ordered, state.page, self.client_service.page_size)

        selected = None
        form = None
        if state.edit.mode == DialogMode.EDITING:
            selected = self.client_service.get_client(state.edit.client_id)
            form = form_from_client(selected) if selected else None
        elif state.edit.mode == DialogMode.CREATING:
            form = blank_form()

        return ClientsPageView(
            page=page,
            filters=state.filters,
            sort=state.sort,
            dialog_mode=state.edit.mode,
            selected=selected,
            form=form,
            navigation=navigation_state(ordered, state.edit.client_id),
            pending_delete=state.delete,
        )
