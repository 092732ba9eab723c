"""
Client Pydantic schemas for record data and responses.
"""

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, Field

from clientdesk.models.client import ClientStatus


class ClientBase(BaseModel):
    """Base client schema with common fields."""
    name: str = Field(..., min_length=1, description="Name is required")
    email: str = Field(..., min_length=1, description="Email is required")
    phone: str = ""
    company: str = ""
    status: ClientStatus = ClientStatus.PROSPECT
    last_contact: Optional[date] = None
    value: int = Field(0, ge=0)
    notes: str = ""


class ClientCreate(ClientBase):
    """Schema for creating a client, or replacing every field of an existing one."""
    pass


class ClientResponse(ClientBase):
    """Schema for client response."""
    id: int

    class Config:
        from_attributes = True


class ClientForm(BaseModel):
    """
    Raw edit-form values as entered in the client dialog.

    Text inputs stay text here; conversion into ClientCreate happens on submit.
    """
    name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""
    status: ClientStatus = ClientStatus.PROSPECT
    last_contact: str = ""
    value: Union[int, str] = 0
    notes: str = ""
