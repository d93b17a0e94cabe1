"""
Unit tests for configuration settings and loading.
"""

import json

import pytest

from adaptive_drive.shared.config import (
    AppConfig,
    ClassifierConfig,
    ConfigLoader,
    LoggingConfig,
    PlaylistConfig,
    SchedulerConfig,
    WeatherPolicy
)
from adaptive_drive.shared.exceptions import ConfigurationError


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Clear config env vars and keep config file discovery inside tmp_path."""
    for name in ('ADAPTIVE_DRIVE_LOG_LEVEL', 'ADAPTIVE_DRIVE_LOG_DIR', 'ADAPTIVE_DRIVE_FILE_LOGGING',
                 'ADAPTIVE_DRIVE_SETTLE_MS', 'ADAPTIVE_DRIVE_DEBUG', 'ADAPTIVE_DRIVE_CONFIG'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('HOME', str(tmp_path))
    return tmp_path


class TestDefaults:
    """Test default configuration values."""

    def test_app_defaults(self, isolated_env):
        config = AppConfig()
        assert config.app_name == 'AdaptiveDrive'
        assert config.debug_mode is False
        assert config.logging.level == 'INFO'
        assert config.logging.file_logging is False
        assert config.scheduler.settle_ms == 400
        assert config.scheduler.settle_seconds == pytest.approx(0.4)

    def test_classifier_defaults(self):
        config = ClassifierConfig()
        assert (config.high_speed_kmh, config.night_starts_after_hour, config.night_ends_before_hour) == (90, 20, 5)

    def test_playlist_defaults(self):
        config = PlaylistConfig()
        assert config.high_speed_types == ('energetic', 'focus')
        assert config.night_types == ('calm', 'ambient')
        assert config.standard_types == ()


class TestEnvironment:
    """Test environment variable overrides."""

    def test_env_overrides(self, isolated_env, monkeypatch):
        monkeypatch.setenv('ADAPTIVE_DRIVE_LOG_LEVEL', 'debug')
        monkeypatch.setenv('ADAPTIVE_DRIVE_FILE_LOGGING', 'TRUE')
        monkeypatch.setenv('ADAPTIVE_DRIVE_SETTLE_MS', '250')
        monkeypatch.setenv('ADAPTIVE_DRIVE_DEBUG', 'true')

        config = AppConfig()
        assert config.logging.level == 'DEBUG'
        assert config.logging.file_logging is True
        assert config.scheduler.settle_ms == 250
        assert config.debug_mode is True

    def test_invalid_log_level(self, isolated_env, monkeypatch):
        monkeypatch.setenv('ADAPTIVE_DRIVE_LOG_LEVEL', 'LOUD')
        with pytest.raises(ConfigurationError) as exc_info:
            LoggingConfig()
        assert exc_info.value.config_key == 'logging.level'


class TestValidation:
    """Test configuration validation."""

    def test_negative_speed_threshold(self):
        with pytest.raises(ConfigurationError):
            ClassifierConfig(high_speed_kmh=-1)

    def test_hour_out_of_range(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ClassifierConfig(night_starts_after_hour=25)
        assert exc_info.value.config_key == 'classifier.night_starts_after_hour'

    def test_negative_settle_window(self):
        with pytest.raises(ConfigurationError):
            SchedulerConfig(settle_ms=-5)

    def test_weather_policy_from_dict(self):
        config = PlaylistConfig(weather_policy={'type_penalties': {'rain': {'calm': 1.0}}, 'high_tempo_bpm': 120})
        assert isinstance(config.weather_policy, WeatherPolicy)
        assert config.weather_policy.penalty_for('rain', 'calm', 130) == 1.5

    def test_weather_policy_penalties(self):
        policy = WeatherPolicy()
        assert policy.penalty_for('clear', 'energetic', 180) == 0.0
        assert policy.penalty_for('storm', 'energetic', 150) == 2.5
        assert policy.penalty_for('storm', 'focus') == 0.5
        assert policy.penalty_for('hail', 'energetic', 180) == 0.0


class TestFromDict:
    """Test AppConfig.from_dict."""

    def test_sections(self):
        config = AppConfig.from_dict({
            'classifier': {'high_speed_kmh': 100},
            'playlist': {'night_types': ['ambient']},
            'scheduler': {'settle_ms': 100},
            'debug_mode': True
        })
        assert config.classifier.high_speed_kmh == 100
        assert config.playlist.night_types == ('ambient',)
        assert config.scheduler.settle_seconds == pytest.approx(0.1)
        assert config.debug_mode is True

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            AppConfig.from_dict({'classifier': {'speed_limit': 100}})
        assert exc_info.value.config_key == 'classifier'

    def test_section_must_be_object(self):
        with pytest.raises(ConfigurationError):
            AppConfig.from_dict({'scheduler': 400})

    def test_to_dict_round_trip(self, isolated_env):
        original = AppConfig.from_dict({'classifier': {'high_speed_kmh': 110}})
        data = original.to_dict()
        sections = {key: data[key] for key in ('classifier', 'playlist', 'scheduler')}
        rebuilt = AppConfig.from_dict(sections)
        assert rebuilt.classifier == original.classifier
        assert rebuilt.playlist == original.playlist


class TestConfigLoader:
    """Test ConfigLoader file discovery and caching."""

    def test_no_file_uses_environment(self, isolated_env):
        config = ConfigLoader().load_config()
        assert config.classifier.high_speed_kmh == 90

    def test_explicit_file(self, isolated_env):
        path = isolated_env / 'custom.json'
        path.write_text(json.dumps({'classifier': {'high_speed_kmh': 120}}))
        assert ConfigLoader(path).load_config().classifier.high_speed_kmh == 120

    def test_missing_explicit_file(self, isolated_env):
        with pytest.raises(ConfigurationError):
            ConfigLoader(isolated_env / 'missing.json').load_config()

    def test_env_file(self, isolated_env, monkeypatch):
        path = isolated_env / 'env.json'
        path.write_text(json.dumps({'scheduler': {'settle_ms': 50}}))
        monkeypatch.setenv('ADAPTIVE_DRIVE_CONFIG', str(path))
        assert ConfigLoader().load_config().scheduler.settle_ms == 50

    def test_working_directory_file(self, isolated_env):
        (isolated_env / 'adaptive_drive.json').write_text(json.dumps({'debug_mode': True}))
        assert ConfigLoader().load_config().debug_mode is True

    def test_malformed_file(self, isolated_env):
        path = isolated_env / 'broken.json'
        path.write_text('{"classifier": ')
        with pytest.raises(ConfigurationError):
            ConfigLoader(path).load_config()

    def test_non_object_file(self, isolated_env):
        path = isolated_env / 'list.json'
        path.write_text('[1, 2]')
        with pytest.raises(ConfigurationError):
            ConfigLoader(path).load_config()

    def test_caching_and_reload(self, isolated_env):
        path = isolated_env / 'custom.json'
        path.write_text(json.dumps({'classifier': {'high_speed_kmh': 120}}))
        loader = ConfigLoader(path)
        first = loader.load_config()
        assert loader.load_config() is first

        path.write_text(json.dumps({'classifier': {'high_speed_kmh': 130}}))
        assert loader.load_config().classifier.high_speed_kmh == 120
        assert loader.reload_config().classifier.high_speed_kmh == 130
        assert loader.get_config_dict()['classifier']['high_speed_kmh'] == 130
