"""
Client query engine.
Pure functions turning the full client collection plus filter, sort and page
settings into the slice that is shown. Nothing here mutates its inputs.
"""

import math
from datetime import date
from typing import Any, Callable, Dict, List, Sequence

from clientdesk.core.config import settings
from clientdesk.schemas.client import ClientResponse
from clientdesk.schemas.query import (
    ClientFilters,
    PageResult,
    SortDirection,
    SortField,
    SortSpec,
)


# Per-field sort keys. Text compares case-insensitively, value numerically,
# last contact by calendar date with missing dates first.
SORT_KEYS: Dict[SortField, Callable[[ClientResponse], Any]] = {
    SortField.NAME: lambda client: client.name.lower(),
    SortField.COMPANY: lambda client: client.company.lower(),
    SortField.EMAIL: lambda client: client.email.lower(),
    SortField.STATUS: lambda client: client.status.value.lower(),
    SortField.VALUE: lambda client: client.value,
    SortField.LAST_CONTACT: lambda client: client.last_contact or date.min,
}


def matches_filters(client: ClientResponse, filters: ClientFilters) -> bool:
    """Check a single client against all three filter predicates."""
    search = filters.search.lower()
    matches_search = search in client.name.lower() or search in client.email.lower()
    matches_status = filters.status is None or client.status == filters.status
    matches_company = not filters.company or filters.company.lower() in client.company.lower()
    return matches_search and matches_status and matches_company


def filter_clients(
    clients: Sequence[ClientResponse],
    filters: ClientFilters,
) -> List[ClientResponse]:
    """Return the clients passing every filter, in their original order."""
    if filters.is_empty:
        return list(clients)
    return [client for client in clients if matches_filters(client, filters)]


def sort_clients(
    clients: Sequence[ClientResponse],
    sort: SortSpec,
) -> List[ClientResponse]:
    """
    Order clients by the sort field and direction.

    Equal keys keep ascending id order in both directions. With no sort field
    the input order is returned unchanged.
    """
    if sort.field == SortField.NONE:
        return list(clients)

    key = SORT_KEYS[sort.field]
    by_id = sorted(clients, key=lambda client: client.id)
    return sorted(by_id, key=key, reverse=sort.direction == SortDirection.DESC)


def count_pages(total: int, page_size: int) -> int:
    """Number of pages for ``total`` items; an empty list still has one page."""
    return max(1, math.ceil(total / page_size))


def paginate(
    clients: Sequence[ClientResponse],
    page: int,
    page_size: int = settings.PAGE_SIZE,
) -> PageResult:
    """
    Cut one page out of an ordered client list.

    Args:
        clients: Filtered and sorted clients
        page: 1-based page number (not clamped; out of range gives no items)
        page_size: Items per page

    Returns:
        PageResult with the items and paging metadata
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    total = len(clients)
    start = max((page - 1) * page_size, 0)
    end = max(page * page_size, 0)
    items = list(clients[start:end])

    return PageResult(
        items=items,
        page=page,
        page_size=page_size,
        total=total,
        total_pages=count_pages(total, page_size),
        start_index=start + 1 if items else 0,
        end_index=start + len(items) if items else 0,
    )


def order_clients(
    clients: Sequence[ClientResponse],
    filters: ClientFilters,
    sort: SortSpec,
) -> List[ClientResponse]:
    """Filter, then sort."""
    return sort_clients(filter_clients(clients, filters), sort)


def query_clients(
    clients: Sequence[ClientResponse],
    filters: ClientFilters,
    sort: SortSpec,
    page: int,
    page_size: int = settings.PAGE_SIZE,
) -> PageResult:
    """Run the full filter, sort and paginate pipeline."""
    return paginate(order_clients(clients, filters, sort), page, page_size)
