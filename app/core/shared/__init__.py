"""
Shared utilities module

This module provides common utilities used across the entire application.
All utilities are domain-agnostic and reusable.
"""

# Logging
from .logger import (
    ColoredFormatter,
    CorrelationIdFilter,
    JSONFormatter,
    configure_logging,
    correlation_id_var,
)

# Validation
from .validators import (
    CPFValidator,
    ValidationError,
)

__all__ = [
    # Logging
    "ColoredFormatter",
    "CorrelationIdFilter",
    "JSONFormatter",
    "configure_logging",
    "correlation_id_var",
    # Validation
    "CPFValidator",
    "ValidationError",
]
