"""
Dependency Injection Container.

Centralized container for creating and managing application dependencies.
Implements Dependency Inversion Principle by wiring concrete implementations to interfaces.

This module is the facade that composes the domain-specific containers.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.credit.application.services import CreditService, CustomerService

from .base import BaseContainer
from .credit import CreditContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Single Responsibility: Compose and delegate to domain-specific containers.
    """

    def __init__(self, config: dict | None = None):
        """
        Initialize container with all domain sub-containers.

        Args:
            config: Optional configuration dict (overrides settings)
        """
        self._base = BaseContainer(config)
        self._credit = CreditContainer(self._base)

    @property
    def settings(self):
        return self._base.settings

    @property
    def config(self):
        return self._base.config

    def get_config(self) -> dict:
        """Get current configuration."""
        return self._base.get_config()

    def get_clock(self):
        """Clock shared by the date rules and request validation."""
        return self._base.get_clock()

    # ============================================================
    # CREDIT (delegated to CreditContainer)
    # ============================================================

    def create_customer_repository(self, db: AsyncSession):
        return self._credit.create_customer_repository(db)

    def create_credit_repository(self, db: AsyncSession):
        return self._credit.create_credit_repository(db)

    def create_customer_service(self, db: AsyncSession) -> CustomerService:
        return self._credit.create_customer_service(db)

    def create_credit_service(self, db: AsyncSession) -> CreditService:
        return self._credit.create_credit_service(db)


_container: DependencyContainer | None = None


def get_container() -> DependencyContainer:
    """Get the process-wide container instance."""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container


def reset_container() -> None:
    """Drop the cached container (tests, settings reload)."""
    global _container
    _container = None


__all__ = [
    "BaseContainer",
    "CreditContainer",
    "DependencyContainer",
    "get_container",
    "reset_container",
]
