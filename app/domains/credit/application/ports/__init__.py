"""
Credit Application Ports

Interface definitions (ports) for the Credit domain.
Uses Protocol for structural typing.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from app.domains.credit.domain.entities import Credit, Customer


@runtime_checkable
class ICustomerRepository(Protocol):
    """
    Interface for customer repository.

    Defines the contract for customer data access.
    """

    async def save(self, customer: Customer) -> Customer:
        """
        Insert a new customer or update an existing one.

        Raises:
            DuplicateEntityException: cpf or email already stored
        """
        ...

    async def find_by_id(self, customer_id: int) -> Customer | None:
        """Get customer by ID"""
        ...

    async def delete(self, customer: Customer) -> None:
        """Delete a customer together with all of its credits"""
        ...


@runtime_checkable
class ICreditRepository(Protocol):
    """
    Interface for credit repository.

    Defines the contract for credit data access.
    """

    async def save(self, credit: Credit) -> Credit:
        """Persist a credit"""
        ...

    async def find_by_credit_code(self, credit_code: UUID) -> Credit | None:
        """Get credit by its public code"""
        ...

    async def find_all_by_customer_id(self, customer_id: int) -> list[Credit]:
        """Get all credits of a customer in insertion order"""
        ...


__all__ = [
    "ICustomerRepository",
    "ICreditRepository",
]
