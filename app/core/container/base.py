"""
Base Container - Shared Settings.

Single Responsibility: Hold configuration shared by the domain containers.
"""

import logging
from datetime import date

from app.config.settings import get_settings

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared configuration.

    Single Responsibility: Expose settings and overrides to the domain containers.
    """

    def __init__(self, config: dict | None = None):
        """
        Initialize base container.

        Args:
            config: Optional configuration dict (overrides settings)
        """
        self.settings = get_settings()
        self.config = config or {}

        logger.debug("BaseContainer initialized")

    def get_config(self) -> dict:
        """Get current configuration."""
        return {
            "environment": self.settings.ENVIRONMENT,
            "max_first_installment_months": self.get_max_first_installment_months(),
            **self.config,
        }

    def get_max_first_installment_months(self) -> int:
        return self.config.get("max_first_installment_months", self.settings.CREDIT_MAX_FIRST_INSTALLMENT_MONTHS)

    def get_clock(self):
        """Clock used by date rules. Tests can pin it through config["today"]."""
        return self.config.get("today", date.today)
