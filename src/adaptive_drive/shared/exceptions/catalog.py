"""
Catalog-related exceptions.
"""

from typing import Optional, Any, Dict

from .base import AdaptiveDriveException


class CatalogError(AdaptiveDriveException):
    """Base exception for track catalog errors."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict['source'] = self.source
        return base_dict


class CatalogLoadError(CatalogError):
    """Raised when a catalog file cannot be read or parsed."""
    pass


class CatalogValidationError(CatalogError):
    """Raised when catalog entries are malformed or share an id."""

    def __init__(self, message: str, track_id: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.track_id = track_id

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict['track_id'] = str(self.track_id) if self.track_id is not None else None
        return base_dict
