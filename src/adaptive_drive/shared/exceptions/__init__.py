"""
Custom exceptions for the AdaptiveDrive application.
"""

from .base import (
    AdaptiveDriveException,
    ConfigurationError,
    ValidationError,
    ContextValidationError,
    SchedulerError
)

from .catalog import (
    CatalogError,
    CatalogLoadError,
    CatalogValidationError
)

__all__ = [
    # Base exceptions
    'AdaptiveDriveException',
    'ConfigurationError',
    'ValidationError',
    'ContextValidationError',
    'SchedulerError',

    # Catalog exceptions
    'CatalogError',
    'CatalogLoadError',
    'CatalogValidationError'
]
