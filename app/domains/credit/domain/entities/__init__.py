"""
Credit Domain Entities
"""

from .credit import Credit, add_months
from .customer import Customer

__all__ = ["Credit", "Customer", "add_months"]
