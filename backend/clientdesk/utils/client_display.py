"""
Display helpers for rendering clients in the table and dialogs.
"""

from datetime import date
from typing import Optional

from clientdesk.models.client import ClientStatus
from clientdesk.schemas.page_state import DialogMode
from clientdesk.schemas.query import PageResult


STATUS_BADGE_CLASSES = {
    ClientStatus.ACTIVE: "bg-green-100 text-green-800 hover:bg-green-200",
    ClientStatus.INACTIVE: "bg-gray-100 text-gray-800 hover:bg-gray-200",
    ClientStatus.PROSPECT: "bg-blue-100 text-blue-800 hover:bg-blue-200",
}
DEFAULT_BADGE_CLASS = "bg-gray-100 text-gray-800 hover:bg-gray-200"


def format_currency(amount: int) -> str:
    """Format a whole-dollar amount as USD, e.g. 50000 -> "$50,000.00"."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_date(value: Optional[date]) -> str:
    """Format a date as M/D/YYYY, or an empty string when missing."""
    if not value:
        return ""
    return f"{value.month}/{value.day}/{value.year}"


def status_badge_class(status) -> str:
    """CSS classes for a status badge; unknown statuses get the neutral badge."""
    try:
        return STATUS_BADGE_CLASSES[ClientStatus(status)]
    except ValueError:
        return DEFAULT_BADGE_CLASS


def total_clients_label(total: int) -> str:
    return f"{total} clients total"


def showing_range_text(page: PageResult) -> str:
    """Pagination summary, e.g. "Showing 11 to 20 of 24 clients"."""
    return f"Showing {page.start_index} to {page.end_index} of {page.total} clients"


def dialog_title(mode: DialogMode) -> str:
    return "Edit Client" if mode == DialogMode.EDITING else "Add New Client"


def dialog_description(mode: DialogMode) -> str:
    if mode == DialogMode.EDITING:
        return "Update client information and save changes."
    return "Fill in the details to add a new client to your CRM."


def submit_label(mode: DialogMode) -> str:
    return "Update Client" if mode == DialogMode.EDITING else "Add Client"


def delete_confirmation_message(client_name: str) -> str:
    return (
        f"Are you sure you want to delete {client_name}? This action cannot be "
        "undone and will permanently remove the client from your CRM."
    )
