"""
Utilities for the client edit form: defaults, prefill and submit conversion.
"""

import re
from datetime import date
from typing import Optional, Union

from pydantic import ValidationError

from clientdesk.core.config import settings
from clientdesk.core.exceptions import ValidationFailedError
from clientdesk.models.client import ClientStatus
from clientdesk.schemas.client import ClientCreate, ClientForm, ClientResponse

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_value(raw: Union[int, str, None]) -> int:
    """
    Read the value input as an integer.

    Leading digits are used ("1200.50" -> 1200); anything unparseable is 0.
    """
    if isinstance(raw, bool) or raw is None:
        return 0
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    if not match:
        return 0
    return int(match.group(1))


def blank_form(today: Optional[date] = None) -> ClientForm:
    """Form values for a new client: empty text, default status, contacted today."""
    today = today or date.today()
    return ClientForm(
        status=ClientStatus(settings.DEFAULT_STATUS),
        last_contact=today.isoformat(),
        value=0,
    )


def form_from_client(client: ClientResponse) -> ClientForm:
    """Prefill the form with an existing client's values."""
    return ClientForm(
        name=client.name,
        email=client.email,
        phone=client.phone,
        company=client.company,
        status=client.status,
        last_contact=client.last_contact.isoformat() if client.last_contact else "",
        value=client.value,
        notes=client.notes,
    )


def form_to_client_create(form: Union[ClientForm, dict]) -> ClientCreate:
    """
    Convert submitted form values into record data.

    Raises:
        ValidationFailedError: If name or email is empty, the value is
            negative, or the status or date cannot be read
    """
    try:
        if not isinstance(form, ClientForm):
            form = ClientForm.model_validate(form)

        return ClientCreate(
            name=form.name,
            email=form.email,
            phone=form.phone,
            company=form.company,
            status=form.status,
            last_contact=form.last_contact or None,
            value=parse_value(form.value),
            notes=form.notes,
        )
    except ValidationError as exc:
        raise ValidationFailedError.from_validation_error(exc) from exc
