"""
Application services for the AdaptiveDrive application.

These services orchestrate domain entities to classify drive contexts
and rank the track catalog for them.
"""

from .mode_classifier import ModeClassifier, classify
from .playlist_generation_service import PlaylistGenerationService
from .context_scheduler import ContextScheduler

__all__ = [
    'ModeClassifier',
    'classify',
    'PlaylistGenerationService',
    'ContextScheduler'
]
