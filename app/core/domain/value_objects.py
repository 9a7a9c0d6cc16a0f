"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Self


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Address(ValueObject):
    """
    Postal address owned by a customer.

    Replaced as a whole when any part of it changes.
    """

    zip_code: str
    street: str

    def _validate(self) -> None:
        if not self.zip_code or not self.street:
            raise ValueError("Zip code and street are required")

    def with_changes(self, zip_code: str | None = None, street: str | None = None) -> "Address":
        """Return a copy with the given parts replaced."""
        return Address(
            zip_code=zip_code if zip_code is not None else self.zip_code,
            street=street if street is not None else self.street,
        )

    def __str__(self) -> str:
        return f"{self.street} ({self.zip_code})"


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")
