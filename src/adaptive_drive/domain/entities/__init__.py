"""
Domain entities for the AdaptiveDrive application.

These represent the core objects of context-driven track selection.
"""

from .drive_context import DriveContext
from .music import Music
from .operating_mode import OperatingMode

__all__ = [
    'DriveContext',
    'Music',
    'OperatingMode'
]
