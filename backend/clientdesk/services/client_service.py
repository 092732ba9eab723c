"""
Client service with business logic.
"""

from typing import List, Optional

from clientdesk.core.config import settings
from clientdesk.core.exceptions import NotFoundError
from clientdesk.core.logging import get_logger
from clientdesk.db.repositories.client_repository import ClientRepository
from clientdesk.models.client import ClientStatus
from clientdesk.schemas.client import ClientCreate, ClientResponse
from clientdesk.schemas.query import ClientFilters, PageResult, SortSpec
from clientdesk.services import query_service
from clientdesk.services.base_service import BaseService

logger = get_logger(__name__)


class ClientService(BaseService):
    """Service for client operations."""

    def __init__(self, client_repo: ClientRepository, page_size: Optional[int] = None):
        self.client_repo = client_repo
        self.page_size = page_size or settings.PAGE_SIZE

    def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        client = self.client_repo.create(**client_data.model_dump())
        logger.info(
            f"Created client {client.id}",
            extra={"client_id": client.id, "client_name": client.name},
        )
        return ClientResponse.model_validate(client)

    def get_client(self, client_id: int) -> Optional[ClientResponse]:
        """Get client by ID."""
        client = self.client_repo.get(client_id)
        if not client:
            return None
        return ClientResponse.model_validate(client)

    def require_client(self, client_id: int) -> ClientResponse:
        """Get client by ID, raising NotFoundError when it does not exist."""
        client = self.get_client(client_id)
        if client is None:
            raise NotFoundError("Client", client_id)
        return client

    def list_clients(
        self,
        status: Optional[ClientStatus] = None,
    ) -> tuple[List[ClientResponse], int]:
        """List clients in insertion order, optionally by status."""
        if status:
            clients = self.client_repo.list(status=status)
        else:
            clients = self.client_repo.list()

        total = len(clients)
        return [ClientResponse.model_validate(client) for client in clients], total

    def update_client(
        self,
        client_id: int,
        client_data: ClientCreate,
    ) -> ClientResponse:
        """Replace every field of a client except its id."""
        updated = self.client_repo.update(client_id, **client_data.model_dump())
        if not updated:
            raise NotFoundError("Client", client_id)

        logger.info(
            f"Updated client {client_id}",
            extra={"client_id": client_id},
        )
        return ClientResponse.model_validate(updated)

    def delete_client(self, client_id: int) -> None:
        """Delete a client."""
        deleted = self.client_repo.delete(client_id)
        if not deleted:
            raise NotFoundError("Client", client_id)

        logger.info(
            f"Deleted client {client_id}",
            extra={"client_id": client_id},
        )

    def ordered_clients(
        self,
        filters: ClientFilters,
        sort: SortSpec,
    ) -> List[ClientResponse]:
        """Filtered and sorted clients, recomputed from the store."""
        clients, _ = self.list_clients()
        return query_service.order_clients(clients, filters, sort)

    def query_clients(
        self,
        filters: ClientFilters,
        sort: SortSpec,
        page: int = 1,
    ) -> PageResult:
        """One page of the filtered and sorted clients."""
        result = query_service.paginate(
            self.ordered_clients(filters, sort),
            page,
            self.page_size,
        )
        logger.debug(
            f"Queried clients page {page}",
            extra={"total": result.total, "total_pages": result.total_pages},
        )
        return result
