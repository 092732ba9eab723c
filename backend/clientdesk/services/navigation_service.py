"""
Selection navigation within the filtered and sorted client list.
Positions are looked up by id on every call so they follow list changes.
"""

from typing import Optional, Sequence

from clientdesk.schemas.client import ClientResponse
from clientdesk.schemas.page_state import NavigationDirection, NavigationState


def find_index(clients: Sequence[ClientResponse], client_id: Optional[int]) -> int:
    """Index of the client with ``client_id``, or -1 when it is not listed."""
    if client_id is None:
        return -1
    for index, client in enumerate(clients):
        if client.id == client_id:
            return index
    return -1


def can_navigate_prev(clients: Sequence[ClientResponse], client_id: Optional[int]) -> bool:
    return find_index(clients, client_id) > 0


def can_navigate_next(clients: Sequence[ClientResponse], client_id: Optional[int]) -> bool:
    index = find_index(clients, client_id)
    return 0 <= index < len(clients) - 1


def neighbor_id(
    clients: Sequence[ClientResponse],
    client_id: Optional[int],
    direction: NavigationDirection,
) -> Optional[int]:
    """
    Id of the client next to ``client_id`` in ``direction``.

    Returns None at either end of the list, or when ``client_id`` is not in it.
    """
    index = find_index(clients, client_id)
    if index < 0:
        return None

    target = index - 1 if direction == NavigationDirection.PREV else index + 1
    if target < 0 or target >= len(clients):
        return None
    return clients[target].id


def navigation_state(
    clients: Sequence[ClientResponse],
    client_id: Optional[int],
) -> NavigationState:
    """Navigation availability for the selected client."""
    index = find_index(clients, client_id)
    return NavigationState(
        index=index if index >= 0 else None,
        total=len(clients),
        can_navigate_prev=index > 0,
        can_navigate_next=0 <= index < len(clients) - 1,
    )
