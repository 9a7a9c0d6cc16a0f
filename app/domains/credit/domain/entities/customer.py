"""
Customer Entity

Aggregate root for a credit applicant. Owns its address and is the
required parent of every credit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from app.core.domain import AggregateRoot, Address

if TYPE_CHECKING:
    from .credit import Credit


@dataclass(eq=False)
class Customer(AggregateRoot[int]):
    """
    Customer aggregate root.

    `cpf` and `email` are unique across all customers and never change after
    registration. The store enforces uniqueness.

    Example:
        ```python
        customer = Customer(
            first_name="Tomás",
            last_name="Farias",
            cpf="517.429.568-07",
            email="tomas@example.com",
            income=Decimal("1000"),
            password="secret",
            address=Address(zip_code="04880-033", street="Travessa Renascer, 806"),
        )
        ```
    """

    first_name: str = ""
    last_name: str = ""
    cpf: str = ""
    email: str = ""
    income: Decimal = Decimal("0")
    password: str = ""
    address: Address | None = None

    # Back-reference only; credits are persisted through their own repository
    credits: list[Credit] = field(default_factory=list, repr=False)

    def apply_update(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        income: Decimal | None = None,
        zip_code: str | None = None,
        street: str | None = None,
    ) -> None:
        """
        Apply a partial update of the mutable fields.

        Fields left as None are not touched. cpf and email are not mutable.
        """
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if income is not None:
            if income < 0:
                raise ValueError("Income cannot be negative")
            self.income = income
        if zip_code is not None or street is not None:
            if self.address is None:
                self.address = Address(zip_code=zip_code or "", street=street or "")
            else:
                self.address = self.address.with_changes(zip_code=zip_code, street=street)
        self.touch()
