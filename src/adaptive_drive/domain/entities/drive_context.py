"""
DriveContext entity: the snapshot of driving conditions a playlist is chosen for.
"""

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional

from ...shared.exceptions import ContextValidationError


@dataclass(frozen=True)
class DriveContext:
    """
    Immutable snapshot of speed, time of day and weather.

    A new context replaces the previous one wholesale on every update.
    Construction never validates: out-of-range values are compared as-is by
    the classifier. Callers that want to reject bad input use ``validate()``.
    """

    speed: float = 0.0          # km/h, 0 is stationary
    time_of_day: float = 9.0    # hour in [0, 24), fractional hours allowed
    weather: str = 'clear'

    def with_changes(self, **changes: Any) -> 'DriveContext':
        """Return a new context with the given fields replaced."""
        return replace(self, **changes)

    def validate(self, known_weather: Optional[Iterable[str]] = None) -> 'DriveContext':
        """Check ranges and return self, raising ContextValidationError otherwise."""
        if not math.isfinite(self.speed) or self.speed < 0:
            raise ContextValidationError(
                f"Speed must be a finite, non-negative number, got {self.speed}",
                field_name='speed',
                field_value=self.speed,
                validation_rule='0 <= speed < inf'
            )
        if not (0.0 <= self.time_of_day < 24.0):
            raise ContextValidationError(
                f"Time of day must be in [0, 24), got {self.time_of_day}",
                field_name='time_of_day',
                field_value=self.time_of_day,
                validation_rule='0 <= time_of_day < 24'
            )
        if not self.weather:
            raise ContextValidationError(
                "Weather tag is required",
                field_name='weather',
                field_value=self.weather,
                validation_rule='non-empty'
            )
        if known_weather is not None:
            known = tuple(known_weather)
            if self.weather not in known:
                raise ContextValidationError(
                    f"Unknown weather tag '{self.weather}'",
                    details=f"expected one of {', '.join(known)}",
                    field_name='weather',
                    field_value=self.weather,
                    validation_rule='known weather tag'
                )
        return self

    @property
    def clock_label(self) -> str:
        """Format the hour as HH:MM for display."""
        if not math.isfinite(self.time_of_day):
            return str(self.time_of_day)
        hours = int(self.time_of_day) % 24
        minutes = int(round((self.time_of_day - int(self.time_of_day)) * 60))
        if minutes == 60:
            hours, minutes = (hours + 1) % 24, 0
        return f"{hours:02d}:{minutes:02d}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'speed': self.speed,
            'time_of_day': self.time_of_day,
            'weather': self.weather
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DriveContext':
        return cls(
            speed=float(data.get('speed', 0.0)),
            time_of_day=float(data.get('time_of_day', data.get('timeOfDay', 9.0))),
            weather=str(data.get('weather', 'clear'))
        )

    def __str__(self) -> str:
        return f"DriveContext(speed={self.speed:g}km/h, time={self.clock_label}, weather={self.weather})"
