"""
Credit Domain Container.

Single Responsibility: Wire all credit domain dependencies.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.credit.application.services import CreditService, CustomerService
from app.domains.credit.infrastructure.repositories import (
    SQLAlchemyCreditRepository,
    SQLAlchemyCustomerRepository,
)

if TYPE_CHECKING:
    from app.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class CreditContainer:
    """
    Credit domain container.

    Single Responsibility: Create credit repositories and services.
    Repositories are bound to the session of the current request.
    """

    def __init__(self, base: "BaseContainer"):
        """
        Initialize credit container.

        Args:
            base: BaseContainer with shared settings
        """
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_customer_repository(self, db: AsyncSession) -> SQLAlchemyCustomerRepository:
        """Create Customer Repository (SQLAlchemy)."""
        return SQLAlchemyCustomerRepository(session=db)

    def create_credit_repository(self, db: AsyncSession) -> SQLAlchemyCreditRepository:
        """Create Credit Repository (SQLAlchemy)."""
        return SQLAlchemyCreditRepository(session=db)

    # ==================== SERVICES ====================

    def create_customer_service(self, db: AsyncSession) -> CustomerService:
        """Create CustomerService with dependencies."""
        return CustomerService(customer_repository=self.create_customer_repository(db))

    def create_credit_service(self, db: AsyncSession) -> CreditService:
        """Create CreditService with dependencies. Shares the session with its CustomerService."""
        return CreditService(
            credit_repository=self.create_credit_repository(db),
            customer_service=self.create_customer_service(db),
            today=self._base.get_clock(),
            max_first_installment_months=self._base.get_max_first_installment_months(),
        )
