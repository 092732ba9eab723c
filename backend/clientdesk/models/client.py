"""
Client model for customer relationship management.
"""

import enum
from datetime import date
from typing import Optional

from pydantic import BaseModel


class ClientStatus(str, enum.Enum):
    """Client status enumeration."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    PROSPECT = "Prospect"


class Client(BaseModel):
    """Client record as held by the in-memory store."""

    id: int
    name: str
    email: str
    phone: str = ""
    company: str = ""
    status: ClientStatus = ClientStatus.PROSPECT
    last_contact: Optional[date] = None
    value: int = 0
    notes: str = ""
