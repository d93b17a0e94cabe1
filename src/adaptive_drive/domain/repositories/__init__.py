"""
Repository interfaces for the domain layer.

These define the contracts that infrastructure implementations
must fulfill to supply the track catalog.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Music


class CatalogRepository(ABC):
    """Read-only repository interface for the track catalog."""

    @abstractmethod
    def find_all(self) -> List[Music]:
        """Return every track in catalog order."""
        pass

    @abstractmethod
    def find_by_id(self, track_id: str) -> Optional[Music]:
        """Find a track by id."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Get total number of tracks."""
        pass
