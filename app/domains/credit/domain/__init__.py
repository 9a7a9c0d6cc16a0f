"""
Credit Domain Layer

Core business objects for the Credit bounded context.

Components:
- Entities: Customer (aggregate root), Credit
- Value Objects: Address, CreditStatus
"""

from app.domains.credit.domain.entities import Credit, Customer
from app.domains.credit.domain.value_objects import Address, CreditStatus

__all__ = [
    # Entities
    "Customer",
    "Credit",
    # Value Objects
    "Address",
    "CreditStatus",
]
