"""
Credit Application DTOs

Data Transfer Objects for the Credit domain.
"""

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any


# ==================== Customer DTOs ====================


@dataclass
class CustomerUpdateData:
    """Partial update of a customer's mutable fields. None means unchanged."""

    first_name: str | None = None
    last_name: str | None = None
    income: Decimal | None = None
    zip_code: str | None = None
    street: str | None = None

    def changed_fields(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


__all__ = [
    "CustomerUpdateData",
]
