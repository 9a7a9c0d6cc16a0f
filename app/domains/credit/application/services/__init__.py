"""
Credit Application Services
"""

from .credit_service import CreditService
from .customer_service import CustomerService

__all__ = [
    "CustomerService",
    "CreditService",
]
