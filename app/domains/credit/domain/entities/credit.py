"""
Credit Entity

A loan requested by a customer. Immutable after creation except for its status.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from app.core.domain import Entity, generate_uuid

from ..value_objects.credit_status import CreditStatus
from .customer import Customer

MAX_FIRST_INSTALLMENT_MONTHS = 3
MAX_NUMBER_OF_INSTALLMENTS = 48


def add_months(start: date, months: int) -> date:
    """Add calendar months to a date, clamping the day to the end of the target month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


@dataclass(eq=False)
class Credit(Entity[int]):
    """
    Credit entity.

    The credit code is generated once at construction and is the public
    identifier of the credit.

    Example:
        ```python
        credit = Credit(
            credit_value=Decimal("1000"),
            day_first_installment=date.today() + timedelta(days=30),
            number_of_installments=24,
            customer=Customer(id=1),
        )
        ```
    """

    credit_code: UUID = field(default_factory=generate_uuid)
    credit_value: Decimal = Decimal("0")
    day_first_installment: date | None = None
    number_of_installments: int = 0
    status: CreditStatus = CreditStatus.IN_PROGRESS
    customer: Customer | None = None

    @property
    def customer_id(self) -> int | None:
        """ID of the owning customer."""
        return self.customer.id if self.customer is not None else None

    def is_first_installment_within_horizon(
        self,
        today: date,
        max_months: int = MAX_FIRST_INSTALLMENT_MONTHS,
    ) -> bool:
        """
        Check the first installment date against the allowed window.

        The date must be strictly after today and strictly before
        today plus `max_months` calendar months.
        """
        if self.day_first_installment is None:
            return False
        limit = add_months(today, max_months)
        return today < self.day_first_installment < limit

    def belongs_to(self, customer_id: int) -> bool:
        return self.customer_id == customer_id
