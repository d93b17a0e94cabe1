"""
Data Transfer Objects (DTOs) for the application layer.

These objects define the contracts for data exchange between
the application layer and external components.
"""

from .playlist_generation import (
    PlaylistGenerationRequest,
    PlaylistGenerationResponse,
    MIXED_FILTER_LABEL
)

__all__ = [
    'PlaylistGenerationRequest',
    'PlaylistGenerationResponse',
    'MIXED_FILTER_LABEL'
]
