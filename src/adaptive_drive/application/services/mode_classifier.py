"""
Operating mode classification for drive contexts.
"""

import logging
from typing import Optional

from ...domain.entities import DriveContext, OperatingMode
from ...shared.config.settings import ClassifierConfig


logger = logging.getLogger(__name__)


class ModeClassifier:
    """
    Maps a drive context to exactly one operating mode.

    Rules are checked in order and the first match wins:

    1. speed above ``high_speed_kmh`` -> HIGH_SPEED_FOCUS
    2. hour after ``night_starts_after_hour`` or before
       ``night_ends_before_hour`` -> NIGHT_MODE_RELAX
    3. otherwise -> STANDARD_ADAPTIVE

    Both comparisons are strict, so 90 km/h, 20:00 and 05:00 fall through to
    the next rule. Weather is not consulted here; the playlist generator
    uses it only to order tracks inside a priority group.
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self.config = config or ClassifierConfig()

    def classify(self, context: DriveContext) -> OperatingMode:
        if context.speed > self.config.high_speed_kmh:
            mode = OperatingMode.HIGH_SPEED_FOCUS
        elif (context.time_of_day > self.config.night_starts_after_hour
              or context.time_of_day < self.config.night_ends_before_hour):
            mode = OperatingMode.NIGHT_MODE_RELAX
        else:
            mode = OperatingMode.STANDARD_ADAPTIVE

        logger.debug("Classified %s as %s", context, mode.value)
        return mode


_default_classifier = ModeClassifier()


def classify(context: DriveContext) -> OperatingMode:
    """Classify a context with the default thresholds (90 km/h, 20:00, 05:00)."""
    return _default_classifier.classify(context)
