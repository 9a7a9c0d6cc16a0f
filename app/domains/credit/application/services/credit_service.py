"""
Credit Service

Credit creation and lookup. Customer existence is always resolved through
CustomerService.
"""

import logging
from collections.abc import Callable
from datetime import date
from uuid import UUID

from app.core.domain import BusinessException, IllegalStateException
from app.domains.credit.application.ports import ICreditRepository
from app.domains.credit.application.services.customer_service import CustomerService
from app.domains.credit.domain.entities import Credit
from app.domains.credit.domain.entities.credit import MAX_FIRST_INSTALLMENT_MONTHS

logger = logging.getLogger(__name__)


class CreditService:
    """
    Application service for credits.

    Single Responsibility: credit rules (first installment window, ownership)
    Dependency Inversion: depends on ICreditRepository and CustomerService
    """

    def __init__(
        self,
        credit_repository: ICreditRepository,
        customer_service: CustomerService,
        today: Callable[[], date] = date.today,
        max_first_installment_months: int = MAX_FIRST_INSTALLMENT_MONTHS,
    ):
        """
        Initialize service.

        Args:
            credit_repository: Repository for credit data access
            customer_service: Resolves and validates the owning customer
            today: Clock used for the first installment window
            max_first_installment_months: Upper bound of the window, exclusive
        """
        self.credit_repository = credit_repository
        self.customer_service = customer_service
        self._today = today
        self._max_first_installment_months = max_first_installment_months

    async def save(self, credit: Credit) -> Credit:
        """
        Validate and persist a new credit.

        Raises:
            BusinessException: "Invalid Date" when the first installment is
                outside the allowed window, or "Id {id} not found" when the
                customer does not exist. Nothing is persisted in either case.
        """
        if not credit.is_first_installment_within_horizon(self._today(), self._max_first_installment_months):
            logger.info(f"Credit rejected, first installment out of window: {credit.day_first_installment}")
            raise BusinessException("Invalid Date")

        customer_id = credit.customer_id
        if customer_id is None:
            raise BusinessException("Customer id is required")

        credit.customer = await self.customer_service.find_by_id(customer_id)
        saved = await self.credit_repository.save(credit)
        logger.info(f"Credit {saved.credit_code} created for customer {customer_id}")
        return saved

    async def find_all_by_customer(self, customer_id: int) -> list[Credit]:
        """Get all credits owned by a customer, in the order they were stored."""
        return await self.credit_repository.find_all_by_customer_id(customer_id)

    async def find_by_credit_code(self, customer_id: int, credit_code: UUID) -> Credit:
        """
        Get a credit by code, checking it belongs to the given customer.

        Raises:
            BusinessException: no credit with that code
            IllegalStateException: the credit belongs to another customer
        """
        credit = await self.credit_repository.find_by_credit_code(credit_code)
        if credit is None:
            raise BusinessException(f"Credit code {credit_code} not found")

        if not credit.belongs_to(customer_id):
            logger.error(
                f"Credit {credit_code} requested by customer {customer_id} "
                f"but owned by customer {credit.customer_id}"
            )
            raise IllegalStateException("Contact admin")

        return credit


__all__ = ["CreditService"]
