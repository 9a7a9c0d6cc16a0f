"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from app.core.domain.entities import (
    AggregateRoot,
    Entity,
    generate_uuid,
)
from app.core.domain.exceptions import (
    BusinessException,
    DomainException,
    DuplicateEntityException,
    IllegalStateException,
)
from app.core.domain.value_objects import (
    Address,
    StatusEnum,
    ValueObject,
)

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "generate_uuid",
    # Value Objects
    "ValueObject",
    "Address",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "BusinessException",
    "DuplicateEntityException",
    "IllegalStateException",
]
