"""
Application entry point.
Assembles logging, the container and the clients page controller.
"""

from clientdesk.controllers.client_controller import ClientController
from clientdesk.core.config import settings
from clientdesk.core.logging import get_logger, setup_logging
from clientdesk.deps.di_container import get_container

logger = get_logger(__name__)


def create_app() -> ClientController:
    """
    Start a client desk session.

    Returns:
        Controller for the clients page, backed by a freshly seeded store
    """
    setup_logging()

    container = get_container()
    controller = container.client_controller()

    logger.info(
        f"{settings.PROJECT_NAME} {settings.VERSION} started",
        extra={"clients": controller.client_service.client_repo.count()},
    )
    return controller
