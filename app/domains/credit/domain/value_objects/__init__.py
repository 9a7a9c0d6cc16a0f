"""
Credit Domain Value Objects
"""

from app.core.domain import Address

from .credit_status import CreditStatus

__all__ = [
    "Address",
    "CreditStatus",
]
