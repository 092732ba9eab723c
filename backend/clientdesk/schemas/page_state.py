"""
Page state schemas.
Transient UI state of the clients page as explicit, immutable values.
"""

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from clientdesk.schemas.client import ClientForm, ClientResponse
from clientdesk.schemas.query import ClientFilters, PageResult, SortSpec


class DialogMode(str, enum.Enum):
    """Edit dialog mode."""
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


class NavigationDirection(str, enum.Enum):
    """Record-to-record navigation direction inside the edit dialog."""
    PREV = "prev"
    NEXT = "next"


class EditDialogState(BaseModel):
    """Edit dialog state: closed, creating a new client, or editing one client by id."""

    model_config = ConfigDict(frozen=True)

    mode: DialogMode = DialogMode.CLOSED
    client_id: Optional[int] = None

    @model_validator(mode="after")
    def check_selection(self):
        if self.mode == DialogMode.EDITING and self.client_id is None:
            raise ValueError("editing requires a client_id")
        if self.mode != DialogMode.EDITING and self.client_id is not None:
            raise ValueError("client_id is only set while editing")
        return self

    @property
    def is_open(self) -> bool:
        return self.mode != DialogMode.CLOSED


class DeleteDialogState(BaseModel):
    """Delete confirmation state: idle, or pending on one client."""

    model_config = ConfigDict(frozen=True)

    client_id: Optional[int] = None
    client_name: str = ""

    @property
    def is_pending(self) -> bool:
        return self.client_id is not None


class PageState(BaseModel):
    """Everything the clients page tracks besides the records themselves."""

    model_config = ConfigDict(frozen=True)

    filters: ClientFilters = ClientFilters()
    sort: SortSpec = SortSpec()
    page: int = 1
    edit: EditDialogState = EditDialogState()
    delete: DeleteDialogState = DeleteDialogState()


class NavigationState(BaseModel):
    """Position of the selected client within the filtered and sorted list."""
    index: Optional[int] = None
    total: int = 0
    can_navigate_prev: bool = False
    can_navigate_next: bool = False


class ClientsPageView(BaseModel):
    """Snapshot handed to the presentation layer after every operation."""
    page: PageResult
    filters: ClientFilters
    sort: SortSpec
    dialog_mode: DialogMode
    selected: Optional[ClientResponse] = None
    form: Optional[ClientForm] = None
    navigation: NavigationState = NavigationState()
    pending_delete: DeleteDialogState = DeleteDialogState()
