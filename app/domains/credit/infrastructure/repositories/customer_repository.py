"""
Customer Repository Implementation

SQLAlchemy implementation of ICustomerRepository.
"""

import logging
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain import Address, DuplicateEntityException
from app.domains.credit.application.ports import ICustomerRepository
from app.domains.credit.domain.entities import Customer
from app.domains.credit.infrastructure.persistence.sqlalchemy.models import (
    CreditModel,
    CustomerModel,
    is_storable_id,
)

logger = logging.getLogger(__name__)

UNIQUE_FIELDS = ("cpf", "email")


class SQLAlchemyCustomerRepository(ICustomerRepository):
    """
    SQLAlchemy implementation of customer repository.

    Handles all customer data persistence operations using async patterns.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, customer_id: int) -> Customer | None:
        """Find customer by ID."""
        if not is_storable_id(customer_id):
            return None
        result = await self.session.execute(select(CustomerModel).where(CustomerModel.id == customer_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save(self, customer: Customer) -> Customer:
        """Save or update a customer."""
        if customer.id is not None:
            # Update existing
            result = await self.session.execute(select(CustomerModel).where(CustomerModel.id == customer.id))
            model = result.scalar_one_or_none()
            if model:
                self._update_model(model, customer)
            else:
                model = self._to_model(customer)
                self.session.add(model)
        else:
            # Create new
            model = self._to_model(customer)
            self.session.add(model)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            fields = self._conflicting_fields(e)
            if not fields:
                logger.error(f"Integrity error saving customer: {e}")
                raise
            logger.warning(f"Customer uniqueness violation on {fields}")
            raise DuplicateEntityException("Customer", fields) from e

        await self.session.refresh(model)
        return self._to_entity(model)

    async def delete(self, customer: Customer) -> None:
        """
        Delete a customer and its credits in a single transaction.
        """
        try:
            await self.session.execute(delete(CreditModel).where(CreditModel.customer_id == customer.id))
            await self.session.execute(delete(CustomerModel).where(CustomerModel.id == customer.id))
            await self.session.commit()
        except Exception as e:
            logger.error(f"Error deleting customer {customer.id}: {e}")
            await self.session.rollback()
            raise

    # Mapping methods

    def _to_entity(self, model: CustomerModel) -> Customer:
        """Convert model to entity."""
        return Customer(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            cpf=model.cpf,
            email=model.email,
            income=Decimal(str(model.income)) if model.income is not None else Decimal("0"),
            password=model.password,
            address=Address(zip_code=model.zip_code, street=model.street),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, customer: Customer) -> CustomerModel:
        """Convert entity to model."""
        address = customer.address or Address(zip_code="-", street="-")
        return CustomerModel(
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            email=customer.email,
            income=customer.income,
            password=customer.password,
            zip_code=address.zip_code,
            street=address.street,
        )

    def _update_model(self, model: CustomerModel, customer: Customer) -> None:
        """Update the mutable columns of a model. cpf and email are left alone."""
        model.first_name = customer.first_name
        model.last_name = customer.last_name
        model.income = customer.income
        if customer.address is not None:
            model.zip_code = customer.address.zip_code
            model.street = customer.address.street

    @staticmethod
    def _conflicting_fields(error: IntegrityError) -> list[str]:
        """Unique column(s) the driver error refers to, empty for other integrity errors."""
        message = str(error.orig).lower()
        if "unique" not in message:
            return []
        return [field for field in UNIQUE_FIELDS if field in message]


__all__ = ["SQLAlchemyCustomerRepository"]
