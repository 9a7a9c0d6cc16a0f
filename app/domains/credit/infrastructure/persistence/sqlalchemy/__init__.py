"""
Credit Infrastructure - SQLAlchemy Models

ORM models backing the credit domain repositories.
"""

from .models import CreditModel, CustomerModel

__all__ = [
    "CustomerModel",
    "CreditModel",
]
