"""
Client repository for in-memory record storage.
"""

from typing import Iterable, List

from clientdesk.db.repositories.base_repository import BaseRepository
from clientdesk.models.client import Client
from clientdesk.schemas.client import ClientCreate


class ClientRepository(BaseRepository[Client]):
    """Repository for client operations."""

    def __init__(self):
        super().__init__(Client)

    def load(self, clients: Iterable[ClientCreate]) -> List[Client]:
        """Replace the stored collection with the given records, numbered from 1."""
        self.clear()
        return [self.create(**client.model_dump()) for client in clients]
