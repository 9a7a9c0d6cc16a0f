"""
Database models package - Declarative base and shared mixins.

Domain tables are declared next to their repositories under
app/domains/<domain>/infrastructure/persistence/sqlalchemy.
"""

from .base import Base, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
]
