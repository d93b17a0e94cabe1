"""
Application layer for the AdaptiveDrive application.

This layer contains application services and DTOs that orchestrate
the domain entities to implement context-driven playlist selection.
"""

from .dtos import (
    PlaylistGenerationRequest,
    PlaylistGenerationResponse
)

__all__ = [
    'PlaylistGenerationRequest',
    'PlaylistGenerationResponse'
]
