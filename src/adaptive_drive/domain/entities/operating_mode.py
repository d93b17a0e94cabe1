"""
Operating modes a drive context is classified into.
"""

from enum import Enum


class OperatingMode(str, Enum):
    """Decision bucket derived fresh from each context; never stored."""
    HIGH_SPEED_FOCUS = "HIGH_SPEED_FOCUS"
    NIGHT_MODE_RELAX = "NIGHT_MODE_RELAX"
    STANDARD_ADAPTIVE = "STANDARD_ADAPTIVE"
