"""
Customer Service

Registration, lookup, partial update and removal of customers.
"""

import logging

from app.core.domain import BusinessException
from app.domains.credit.application.dto import CustomerUpdateData
from app.domains.credit.application.ports import ICustomerRepository
from app.domains.credit.domain.entities import Customer

logger = logging.getLogger(__name__)


class CustomerService:
    """
    Application service for the Customer aggregate.

    Owns the "customer must exist" check used by every other component that
    resolves a customer reference.
    """

    def __init__(self, customer_repository: ICustomerRepository):
        """
        Initialize service.

        Args:
            customer_repository: Repository for customer data access
        """
        self.customer_repository = customer_repository

    async def save(self, customer: Customer) -> Customer:
        """
        Register a new customer.

        Raises:
            DuplicateEntityException: cpf or email already registered
        """
        saved = await self.customer_repository.save(customer)
        logger.info(f"Customer {saved.id} registered")
        return saved

    async def find_by_id(self, customer_id: int) -> Customer:
        """
        Get a customer or fail.

        Raises:
            BusinessException: no customer with that id
        """
        customer = await self.customer_repository.find_by_id(customer_id)
        if customer is None:
            raise BusinessException(f"Id {customer_id} not found")
        return customer

    async def update(self, customer_id: int, changes: CustomerUpdateData) -> Customer:
        """
        Apply a partial update to the mutable fields of a customer.

        Args:
            customer_id: Customer to update
            changes: Fields to change; unset fields are left as they are

        Returns:
            The updated customer
        """
        customer = await self.find_by_id(customer_id)
        customer.apply_update(**changes.changed_fields())
        updated = await self.customer_repository.save(customer)
        logger.info(f"Customer {customer_id} updated: {sorted(changes.changed_fields())}")
        return updated

    async def delete(self, customer_id: int) -> None:
        """Delete a customer and, by cascade, all of its credits."""
        customer = await self.find_by_id(customer_id)
        await self.customer_repository.delete(customer)
        logger.info(f"Customer {customer_id} deleted")


__all__ = ["CustomerService"]
