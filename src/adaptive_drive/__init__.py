"""
AdaptiveDrive: picks music for the current driving context.

The core is a pure decision function: a drive context (speed, time of day,
weather) is classified into an operating mode, and the track catalog is
re-ranked so the mode's preferred track types come first.
"""

from .domain.entities import DriveContext, Music, OperatingMode
from .application.services import (
    ModeClassifier,
    classify,
    PlaylistGenerationService,
    ContextScheduler
)
from .application.dtos import PlaylistGenerationRequest, PlaylistGenerationResponse
from .infrastructure.persistence import (
    InMemoryCatalogRepository,
    default_catalog,
    load_catalog_file
)

__version__ = "1.0.0"

__all__ = [
    'DriveContext',
    'Music',
    'OperatingMode',
    'ModeClassifier',
    'classify',
    'PlaylistGenerationService',
    'ContextScheduler',
    'PlaylistGenerationRequest',
    'PlaylistGenerationResponse',
    'InMemoryCatalogRepository',
    'default_catalog',
    'load_catalog_file'
]
