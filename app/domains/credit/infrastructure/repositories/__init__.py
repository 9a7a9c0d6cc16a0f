"""
Credit Infrastructure - Repositories

SQLAlchemy implementations of the credit domain ports.
"""

from .credit_repository import SQLAlchemyCreditRepository
from .customer_repository import SQLAlchemyCustomerRepository

__all__ = [
    "SQLAlchemyCustomerRepository",
    "SQLAlchemyCreditRepository",
]
