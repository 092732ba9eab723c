"""
Domain models.
"""

from clientdesk.models.client import Client, ClientStatus

__all__ = [
    "Client",
    "ClientStatus",
]
