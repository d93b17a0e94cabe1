"""
Shared fixtures for the AdaptiveDrive test suite.
"""

import logging

import pytest

from adaptive_drive.domain.entities import DriveContext, Music
from adaptive_drive.infrastructure.logging import logger as logger_module
from adaptive_drive.infrastructure.persistence import InMemoryCatalogRepository
from adaptive_drive.application.services import PlaylistGenerationService
from adaptive_drive.shared.config import AppConfig, LoggingConfig


@pytest.fixture
def sample_tracks():
    """Six tracks covering every type, two of them above 140 BPM."""
    return [
        Music(id='a', title='Overtake', artist='Redline Club', type='energetic', tempo_bpm=150),
        Music(id='b', title='Rest Stop', artist='Slow Tide', type='calm', tempo_bpm=70),
        Music(id='c', title='Telemetry', artist='Metronome Unit', type='focus', tempo_bpm=110),
        Music(id='d', title='Fogbank', artist='Low Orbit', type='ambient', tempo_bpm=60),
        Music(id='e', title='Highway Pulse', artist='Neon Drive', type='energetic', tempo_bpm=120),
        Music(id='f', title='Quick Breeze', artist='Harbor Lights', type='calm', tempo_bpm=145),
    ]


@pytest.fixture
def catalog(sample_tracks):
    return InMemoryCatalogRepository(sample_tracks)


@pytest.fixture
def service(catalog):
    return PlaylistGenerationService(catalog)


@pytest.fixture
def empty_service():
    return PlaylistGenerationService(InMemoryCatalogRepository([]))


@pytest.fixture
def highway_context():
    return DriveContext(speed=95, time_of_day=12, weather='clear')


@pytest.fixture
def night_context():
    return DriveContext(speed=50, time_of_day=22, weather='clear')


@pytest.fixture
def city_context():
    return DriveContext(speed=50, time_of_day=12, weather='clear')


@pytest.fixture
def quiet_config():
    """Configuration with console and file logging switched off."""
    return AppConfig(logging=LoggingConfig(console_logging=False, file_logging=False))


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by setup_logging so tests stay isolated."""
    yield
    app_logger = logging.getLogger(logger_module.ROOT_LOGGER_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    for existing in list(app_logger.filters):
        app_logger.removeFilter(existing)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True
    logger_module.clear_correlation_id()
    logger_module._log_setup_complete = False
