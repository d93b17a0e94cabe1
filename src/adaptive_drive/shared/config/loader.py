"""
Configuration loader utilities for the AdaptiveDrive application.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from .settings import AppConfig
from ..exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading configuration from environment and file sources."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else None
        self.config_cache: Optional[AppConfig] = None

    def load_config(self, force_reload: bool = False) -> AppConfig:
        """Load application configuration from environment variables and files."""
        if self.config_cache is not None and not force_reload:
            return self.config_cache

        config_file = self._find_config_file()
        try:
            if config_file:
                config = AppConfig.from_dict(self._read_config_file(config_file))
                logger.debug(f"Configuration loaded from file: {config_file}")
            else:
                config = AppConfig()
                logger.debug("Configuration loaded from environment variables")
        except ConfigurationError:
            raise
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to load configuration: {e}")
            raise ConfigurationError(f"Configuration loading failed: {e}", original_exception=e)

        self.config_cache = config
        return config

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in standard locations."""
        if self.config_file is not None:
            if not self.config_file.exists():
                raise ConfigurationError(
                    "Configuration file does not exist",
                    details=str(self.config_file),
                    config_key='config_file'
                )
            return self.config_file

        env_path = os.getenv('ADAPTIVE_DRIVE_CONFIG')
        if env_path:
            path = Path(env_path).expanduser()
            if not path.exists():
                raise ConfigurationError(
                    "ADAPTIVE_DRIVE_CONFIG points to a missing file",
                    details=str(path),
                    config_key='ADAPTIVE_DRIVE_CONFIG',
                    config_value=env_path
                )
            return path

        config_locations = [
            Path('adaptive_drive.json'),
            Path('~/.adaptive_drive/config.json').expanduser(),
        ]
        for location in config_locations:
            if location.exists():
                logger.debug(f"Found config file: {location}")
                return location

        logger.debug("No config file found, using environment variables only")
        return None

    def _read_config_file(self, config_file: Path) -> Dict[str, Any]:
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to read config file {config_file}",
                details=str(e),
                original_exception=e
            )
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_file} must contain a JSON object")
        return data

    def reload_config(self) -> AppConfig:
        """Force reload configuration from sources."""
        self.config_cache = None
        return self.load_config(force_reload=True)

    def get_config_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary for debugging/logging."""
        return self.load_config().to_dict()


# Global configuration loader instance
config_loader = ConfigLoader()


def get_config() -> AppConfig:
    """Get the application configuration."""
    return config_loader.load_config()


def reload_config() -> AppConfig:
    """Reload the application configuration."""
    return config_loader.reload_config()


def get_config_dict() -> Dict[str, Any]:
    """Get configuration as dictionary."""
    return config_loader.get_config_dict()
