"""
Configuration, container wiring and startup tests.
"""

from clientdesk.controllers.client_controller import ClientController
from clientdesk.core.config import Settings
from clientdesk.db.init_db import SEED_CLIENTS
from clientdesk.deps.di_container import create_container, get_container
from clientdesk.main import create_app


def test_settings_defaults():
    settings = Settings()

    assert settings.PAGE_SIZE == 10
    assert settings.DEFAULT_STATUS == "Prospect"
    assert settings.SEED_ON_STARTUP is True


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE", "25")

    assert Settings().PAGE_SIZE == 25


def test_container_seeds_store():
    container = create_container()

    repository = container.client_repository()

    assert repository.count() == len(SEED_CLIENTS)


def test_container_without_seed_starts_empty():
    container = create_container(seed_on_startup=False)

    assert container.client_repository().count() == 0


def test_controllers_share_one_store():
    container = create_container(page_size=5)

    first = container.client_controller()
    second = container.client_controller()
    first.delete_client(1)

    assert isinstance(first, ClientController)
    assert first is not second
    assert second.get_view().page.total == len(SEED_CLIENTS) - 1
    assert len(second.get_view().page.items) == 5


def test_seed_collection_paginates():
    controller = create_container().client_controller()

    view = controller.get_view()

    assert view.page.total == len(SEED_CLIENTS)
    assert view.page.total_pages == -(-len(SEED_CLIENTS) // 10)


def test_create_app_returns_seeded_controller():
    controller = create_app()

    assert isinstance(controller, ClientController)
    assert controller.client_service.client_repo is get_container().client_repository()
    assert controller.get_view().page.total > 0
