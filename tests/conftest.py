"""
Pytest configuration and fixtures.
Provides in-memory client stores, services and controllers.
"""

from datetime import date

import pytest

from clientdesk.controllers.client_controller import ClientController
from clientdesk.db.init_db import seed_initial_data
from clientdesk.db.repositories.client_repository import ClientRepository
from clientdesk.models.client import ClientStatus
from clientdesk.schemas.client import ClientCreate, ClientResponse
from clientdesk.services.client_service import ClientService


def build_client_data(**overrides) -> ClientCreate:
    """Client data with sensible defaults; keyword arguments override fields."""
    values = {
        "name": "Test Client",
        "email": "test@example.com",
        "phone": "",
        "company": "Example Co",
        "status": ClientStatus.ACTIVE,
        "last_contact": date(2024, 1, 15),
        "value": 1000,
        "notes": "",
    }
    values.update(overrides)
    return ClientCreate(**values)


def build_client(id: int, **overrides) -> ClientResponse:
    """A standalone client record for pure query and navigation tests."""
    return ClientResponse(id=id, **build_client_data(**overrides).model_dump())


@pytest.fixture
def make_client_data():
    return build_client_data


@pytest.fixture
def make_client():
    return build_client


@pytest.fixture(scope="function")
def client_repo():
    """An empty client store."""
    return ClientRepository()


@pytest.fixture(scope="function")
def seeded_repo():
    """A client store holding the seed collection."""
    repository = ClientRepository()
    seed_initial_data(repository)
    return repository


@pytest.fixture(scope="function")
def client_service(client_repo):
    return ClientService(client_repo)


@pytest.fixture(scope="function")
def fifteen_clients(client_service):
    """Service over a store of 15 clients named Client 01 .. Client 15."""
    for number in range(1, 16):
        client_service.create_client(
            build_client_data(
                name=f"Client {number:02d}",
                email=f"client{number:02d}@example.com",
                value=number * 100,
            )
        )
    return client_service


@pytest.fixture(scope="function")
def controller(fifteen_clients):
    return ClientController(fifteen_clients)
