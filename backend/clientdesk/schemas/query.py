"""
Query schemas: filters, sort specification and page results for the client list.
"""

import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from clientdesk.models.client import ClientStatus
from clientdesk.schemas.client import ClientResponse


ALL_STATUSES = "all"


class SortField(str, enum.Enum):
    """Columns the client list can be sorted by."""
    NONE = "none"
    NAME = "name"
    COMPANY = "company"
    EMAIL = "email"
    STATUS = "status"
    VALUE = "value"
    LAST_CONTACT = "last_contact"


class SortDirection(str, enum.Enum):
    """Sort direction."""
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ClientFilters(BaseModel):
    """
    Filter criteria for the client list.

    Empty text and a missing status never constrain the result.
    The status selector's "all" entry is accepted and stored as no constraint.
    """

    model_config = ConfigDict(frozen=True)

    search: str = ""
    status: Optional[ClientStatus] = None
    company: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        if value is None or value == "" or value == ALL_STATUSES:
            return None
        return value

    @property
    def is_empty(self) -> bool:
        return not self.search and self.status is None and not self.company


class SortSpec(BaseModel):
    """Sort field and direction."""

    model_config = ConfigDict(frozen=True)

    field: SortField = SortField.NONE
    direction: SortDirection = SortDirection.ASC


class PageResult(BaseModel):
    """One page of the filtered and sorted client list."""
    items: List[ClientResponse]
    page: int
    page_size: int
    total: int
    total_pages: int
    start_index: int  # 1-based position of the first item shown, 0 when empty
    end_index: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def page_numbers(self) -> List[int]:
        return list(range(1, self.total_pages + 1))
