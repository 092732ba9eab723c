"""
Dependency injection container using dependency-injector.
Wires the client store, services and controllers.
"""

from dependency_injector import containers, providers

from clientdesk.controllers.client_controller import ClientController
from clientdesk.core.config import settings
from clientdesk.db.init_db import seed_initial_data
from clientdesk.db.repositories.client_repository import ClientRepository
from clientdesk.services.client_service import ClientService


def build_client_repository(seed: bool = True) -> ClientRepository:
    """Create the client store, loaded with the seed collection when ``seed`` is set."""
    repository = ClientRepository()
    if seed:
        seed_initial_data(repository)
    return repository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # One store per container; it lives as long as the session
    client_repository = providers.Singleton(
        build_client_repository,
        seed=config.seed_on_startup,
    )

    # Services
    client_service = providers.Singleton(
        ClientService,
        client_repo=client_repository,
        page_size=config.page_size,
    )

    # Controllers
    client_controller = providers.Factory(
        ClientController,
        client_service=client_service,
    )


def create_container(**overrides) -> Container:
    """Create a container configured from settings, with optional overrides."""
    container = Container()
    config = {
        "seed_on_startup": settings.SEED_ON_STARTUP,
        "page_size": settings.PAGE_SIZE,
    }
    config.update(overrides)
    container.config.from_dict(config)
    return container


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = create_container()
    return _container
