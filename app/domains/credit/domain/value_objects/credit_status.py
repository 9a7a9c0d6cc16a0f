"""
Credit Status Value Objects
"""

from app.core.domain import StatusEnum


class CreditStatus(StatusEnum):
    """Lifecycle status of a credit request."""

    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    def is_final(self) -> bool:
        """Check if the credit has been decided."""
        return self in (CreditStatus.APPROVED, CreditStatus.REJECTED)
