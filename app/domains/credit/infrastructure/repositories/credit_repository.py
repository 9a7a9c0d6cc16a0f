"""
Credit Repository Implementation

SQLAlchemy implementation of ICreditRepository.
"""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain import Address
from app.domains.credit.application.ports import ICreditRepository
from app.domains.credit.domain.entities import Credit, Customer
from app.domains.credit.infrastructure.persistence.sqlalchemy.models import (
    CreditModel,
    CustomerModel,
    is_storable_id,
)

logger = logging.getLogger(__name__)


class SQLAlchemyCreditRepository(ICreditRepository):
    """
    SQLAlchemy implementation of credit repository.

    The owning customer is loaded together with each credit (joined eager load).
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, credit: Credit) -> Credit:
        """Persist a new credit or update the status of an existing one."""
        if credit.id is not None:
            result = await self.session.execute(select(CreditModel).where(CreditModel.id == credit.id))
            model = result.scalar_one_or_none()
            if model:
                model.status = credit.status
            else:
                model = self._to_model(credit)
                self.session.add(model)
        else:
            model = self._to_model(credit)
            self.session.add(model)

        try:
            await self.session.commit()
        except Exception as e:
            logger.error(f"Error saving credit {credit.credit_code}: {e}")
            await self.session.rollback()
            raise

        await self.session.refresh(model)
        return self._to_entity(model, owner=credit.customer)

    async def find_by_credit_code(self, credit_code: UUID) -> Credit | None:
        """Find credit by its public code."""
        result = await self.session.execute(select(CreditModel).where(CreditModel.credit_code == credit_code))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_all_by_customer_id(self, customer_id: int) -> list[Credit]:
        """Find all credits of a customer, oldest first."""
        if not is_storable_id(customer_id):
            return []
        result = await self.session.execute(
            select(CreditModel).where(CreditModel.customer_id == customer_id).order_by(CreditModel.id)
        )
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    # Mapping methods

    def _to_entity(self, model: CreditModel, owner: Customer | None = None) -> Credit:
        """Convert model to entity."""
        if owner is None or owner.id != model.customer_id:
            owner = self._customer_to_entity(model.customer)

        return Credit(
            id=model.id,
            credit_code=model.credit_code,
            credit_value=Decimal(str(model.credit_value)),
            day_first_installment=model.day_first_installment,
            number_of_installments=model.number_of_installments,
            status=model.status,
            customer=owner,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, credit: Credit) -> CreditModel:
        """Convert entity to model."""
        return CreditModel(
            credit_code=credit.credit_code,
            credit_value=credit.credit_value,
            day_first_installment=credit.day_first_installment,
            number_of_installments=credit.number_of_installments,
            status=credit.status,
            customer_id=credit.customer_id,
        )

    @staticmethod
    def _customer_to_entity(model: CustomerModel) -> Customer:
        return Customer(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            cpf=model.cpf,
            email=model.email,
            income=Decimal(str(model.income)),
            password=model.password,
            address=Address(zip_code=model.zip_code, street=model.street),
        )


__all__ = ["SQLAlchemyCreditRepository"]
