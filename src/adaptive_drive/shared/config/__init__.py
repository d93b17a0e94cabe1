"""
Configuration management for the AdaptiveDrive application.
"""

from .settings import (
    AppConfig,
    LoggingConfig,
    ClassifierConfig,
    PlaylistConfig,
    WeatherPolicy,
    SchedulerConfig,
    load_config
)

from .loader import (
    ConfigLoader,
    get_config,
    reload_config,
    get_config_dict
)

__all__ = [
    'AppConfig',
    'LoggingConfig',
    'ClassifierConfig',
    'PlaylistConfig',
    'WeatherPolicy',
    'SchedulerConfig',
    'load_config',
    'ConfigLoader',
    'get_config',
    'reload_config',
    'get_config_dict'
]
