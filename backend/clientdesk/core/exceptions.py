"""
Application exceptions.
NotFoundError and ValidationFailedError are the only failures the core signals.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError


logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base application exception."""
    def __init__(self, message: str, code: str = "error", details: Any = None):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when an operation references an id absent from the store."""
    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} {entity_id} not found",
            code="not_found",
            details={"entity": entity, "id": entity_id},
        )


class ValidationFailedError(AppException):
    """Raised when submitted client data is missing required fields or is malformed."""
    def __init__(self, message: str = "Validation error", details: Optional[list] = None):
        super().__init__(message, code="validation_failed", details=details or [])

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ValidationFailedError":
        """Build from a pydantic ValidationError with JSON-safe details."""
        serialized_errors = serialize_validation_errors(exc.errors())
        logger.warning(
            f"Validation error: {serialized_errors}",
            extra={"errors": serialized_errors},
        )
        return cls(details=serialized_errors)

    @property
    def fields(self) -> list:
        """Names of the fields that failed validation."""
        names = []
        for error in self.details:
            loc = error.get("loc") or ()
            if loc and loc[0] not in names:
                names.append(loc[0])
        return names


def serialize_validation_errors(errors: list) -> list:
    """Convert validation errors to JSON-serializable format."""
    serialized = []
    for error in errors:
        serialized_error = {}
        for key, value in error.items():
            if key == "ctx" and isinstance(value, dict):
                # Context may hold non-serializable objects like ValueError
                serialized_ctx = {}
                for ctx_key, ctx_value in value.items():
                    if isinstance(ctx_value, Exception):
                        serialized_ctx[ctx_key] = str(ctx_value)
                    else:
                        serialized_ctx[ctx_key] = ctx_value
                serialized_error[key] = serialized_ctx
            elif isinstance(value, Exception):
                serialized_error[key] = str(value)
            else:
                serialized_error[key] = value
        serialized.append(serialized_error)
    return serialized
