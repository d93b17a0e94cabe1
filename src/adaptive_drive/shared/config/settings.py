"""
Configuration settings for the AdaptiveDrive application.

This module contains all configuration classes and their default values.
Environment variables provide the defaults; a JSON config file may override
them through the loader.
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Any, Optional, Tuple

from ..exceptions import ConfigurationError


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class LoggingConfig:
    """Configuration for logging settings."""

    level: str = field(default_factory=lambda: os.getenv('ADAPTIVE_DRIVE_LOG_LEVEL', 'INFO'))
    log_dir: Path = field(default_factory=lambda: Path(os.getenv('ADAPTIVE_DRIVE_LOG_DIR', 'logs')))
    log_file_prefix: str = "adaptive_drive"
    colored_output: bool = True
    file_logging: bool = field(
        default_factory=lambda: os.getenv('ADAPTIVE_DRIVE_FILE_LOGGING', 'false').lower() == 'true'
    )
    console_logging: bool = True

    def __post_init__(self):
        """Validate and normalize configuration after initialization."""
        self.log_dir = Path(self.log_dir)
        if self.level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.level}. Must be one of {VALID_LOG_LEVELS}",
                config_key='logging.level',
                config_value=self.level
            )
        self.level = self.level.upper()


@dataclass
class ClassifierConfig:
    """Thresholds for the operating mode classifier. All comparisons are strict."""

    high_speed_kmh: float = 90.0
    night_starts_after_hour: float = 20.0
    night_ends_before_hour: float = 5.0

    def __post_init__(self):
        if self.high_speed_kmh < 0:
            raise ConfigurationError(
                "High speed threshold must not be negative",
                config_key='classifier.high_speed_kmh',
                config_value=self.high_speed_kmh
            )
        for key in ('night_starts_after_hour', 'night_ends_before_hour'):
            hour = getattr(self, key)
            if not (0.0 <= hour <= 24.0):
                raise ConfigurationError(
                    f"{key} must be between 0 and 24, got {hour}",
                    config_key=f'classifier.{key}',
                    config_value=hour
                )


@dataclass
class WeatherPolicy:
    """
    Intra-group tie-break applied by the playlist generator.

    A track's penalty is ``type_penalties[weather][track.type]`` plus
    ``high_tempo_penalty`` when the weather is tempo sensitive and the track's
    tempo is above ``high_tempo_bpm``. Lower penalties sort first; ties keep
    catalog order.
    """

    type_penalties: Dict[str, Dict[str, float]] = field(default_factory=lambda: {
        'rain': {'energetic': 1.0},
        'storm': {'energetic': 2.0, 'focus': 0.5},
        'snow': {'energetic': 1.0},
        'fog': {'energetic': 1.0},
    })
    tempo_sensitive_weather: Tuple[str, ...] = ('rain', 'storm', 'snow', 'fog')
    high_tempo_bpm: float = 140.0
    high_tempo_penalty: float = 0.5

    def __post_init__(self):
        self.tempo_sensitive_weather = tuple(self.tempo_sensitive_weather)
        if self.high_tempo_bpm <= 0:
            raise ConfigurationError(
                "High tempo threshold must be positive",
                config_key='playlist.weather_policy.high_tempo_bpm',
                config_value=self.high_tempo_bpm
            )

    def penalty_for(self, weather: str, track_type: str, tempo_bpm: Optional[float] = None) -> float:
        """Return the tie-break penalty; unknown weather tags score zero."""
        penalty = self.type_penalties.get(weather, {}).get(track_type, 0.0)
        if (weather in self.tempo_sensitive_weather
                and tempo_bpm is not None
                and tempo_bpm > self.high_tempo_bpm):
            penalty += self.high_tempo_penalty
        return penalty


@dataclass
class PlaylistConfig:
    """Configuration for context-driven playlist generation."""

    # Track types ranked first for each operating mode. An empty tuple means
    # a mixed playlist where no type is promoted.
    high_speed_types: Tuple[str, ...] = ('energetic', 'focus')
    night_types: Tuple[str, ...] = ('calm', 'ambient')
    standard_types: Tuple[str, ...] = ()

    known_weather: Tuple[str, ...] = ('clear', 'rain', 'storm', 'snow', 'fog')
    weather_policy: WeatherPolicy = field(default_factory=WeatherPolicy)

    def __post_init__(self):
        self.high_speed_types = tuple(self.high_speed_types)
        self.night_types = tuple(self.night_types)
        self.standard_types = tuple(self.standard_types)
        self.known_weather = tuple(self.known_weather)
        if isinstance(self.weather_policy, dict):
            self.weather_policy = WeatherPolicy(**self.weather_policy)


@dataclass
class SchedulerConfig:
    """Configuration for debounced context re-evaluation."""

    settle_ms: float = field(default_factory=lambda: float(os.getenv('ADAPTIVE_DRIVE_SETTLE_MS', '400')))

    def __post_init__(self):
        if self.settle_ms < 0:
            raise ConfigurationError(
                "Settling window must not be negative",
                config_key='scheduler.settle_ms',
                config_value=self.settle_ms
            )

    @property
    def settle_seconds(self) -> float:
        return self.settle_ms / 1000.0


@dataclass
class AppConfig:
    """Main application configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    playlist: PlaylistConfig = field(default_factory=PlaylistConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)

    app_name: str = "AdaptiveDrive"
    app_version: str = "1.0.0"
    debug_mode: bool = field(default_factory=lambda: os.getenv('ADAPTIVE_DRIVE_DEBUG', 'false').lower() == 'true')

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """Build a configuration from nested sections, e.g. a parsed JSON file."""
        sections = {
            'logging': LoggingConfig,
            'classifier': ClassifierConfig,
            'playlist': PlaylistConfig,
            'scheduler': SchedulerConfig,
        }
        kwargs: Dict[str, Any] = {}
        for name, section_cls in sections.items():
            section = data.get(name)
            if section is None:
                continue
            if not isinstance(section, dict):
                raise ConfigurationError(f"Config section '{name}' must be an object", config_key=name)
            known = {f.name for f in fields(section_cls)}
            unknown = set(section) - known
            if unknown:
                raise ConfigurationError(
                    f"Unknown keys in config section '{name}': {sorted(unknown)}",
                    config_key=name
                )
            kwargs[name] = section_cls(**section)
        if 'debug_mode' in data:
            kwargs['debug_mode'] = bool(data['debug_mode'])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        policy = self.playlist.weather_policy
        return {
            'app_name': self.app_name,
            'app_version': self.app_version,
            'debug_mode': self.debug_mode,
            'logging': {
                'level': self.logging.level,
                'log_dir': str(self.logging.log_dir),
                'colored_output': self.logging.colored_output,
                'file_logging': self.logging.file_logging,
                'console_logging': self.logging.console_logging
            },
            'classifier': {
                'high_speed_kmh': self.classifier.high_speed_kmh,
                'night_starts_after_hour': self.classifier.night_starts_after_hour,
                'night_ends_before_hour': self.classifier.night_ends_before_hour
            },
            'playlist': {
                'high_speed_types': list(self.playlist.high_speed_types),
                'night_types': list(self.playlist.night_types),
                'standard_types': list(self.playlist.standard_types),
                'known_weather': list(self.playlist.known_weather),
                'weather_policy': {
                    'type_penalties': policy.type_penalties,
                    'tempo_sensitive_weather': list(policy.tempo_sensitive_weather),
                    'high_tempo_bpm': policy.high_tempo_bpm,
                    'high_tempo_penalty': policy.high_tempo_penalty
                }
            },
            'scheduler': {
                'settle_ms': self.scheduler.settle_ms
            }
        }


def load_config() -> AppConfig:
    """Load application configuration from environment variables."""
    return AppConfig()
