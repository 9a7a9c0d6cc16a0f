"""
Domain Exceptions

These exceptions represent business rule violations and anomalous states.
They are raised by services and repositories and translated to HTTP
responses in the API layer (see app.api.exception_handlers).
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "DUPLICATE_ENTITY")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}


class BusinessException(DomainException):
    """
    Raised when a domain rule is violated or a referenced entity does not exist.

    The caller can recover by correcting the input.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, "BUSINESS_ERROR", details)


class DuplicateEntityException(DomainException):
    """Raised when a uniqueness constraint is violated."""

    def __init__(self, entity_type: str, fields: list[str], message: str | None = None):
        self.entity_type = entity_type
        self.fields = fields
        field_list = ", ".join(fields) if fields else "unique key"
        msg = message or f"{entity_type} with the same {field_list} already exists"
        super().__init__(
            msg,
            "DUPLICATE_ENTITY",
            {"entity_type": entity_type, "fields": fields},
        )


class IllegalStateException(DomainException):
    """
    Raised on an anomalous cross-reference, such as a credit requested
    through a customer that does not own it.

    Not user-correctable.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, "ILLEGAL_STATE", details)
