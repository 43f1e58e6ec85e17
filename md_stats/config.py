"""Configuration management for md-stats"""

import os
import logging
from typing import Optional
import yaml

from .exceptions import ConfigError
from .mdadm import DEFAULT_SYSTEM_PATH

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigManager:
    """Manages loading and accessing configuration from YAML file"""

    def __init__(self, config_file: str, logger: Optional[logging.Logger] = None):
        """Initialize configuration manager

        Args:
            config_file: Path to configuration file
            logger: Logger instance

        Raises:
            ConfigError: If the file exists but cannot be loaded
        """
        self.config_file = os.path.expanduser(config_file)
        self.logger = logger or logging.getLogger(__name__)

        self.system_path: str = DEFAULT_SYSTEM_PATH
        self.pretty: bool = False
        self.log_level: Optional[str] = None

        self.load()

    def load(self) -> None:
        """Load configuration from YAML file

        Configuration file structure:
        ```yaml
        system_path: /sys/block   # Directory holding block device entries
        pretty: false             # Indent JSON output
        log_level: WARNING        # DEBUG, INFO, WARNING or ERROR
        ```
        """
        if not os.path.exists(self.config_file):
            self.logger.warning(f"Configuration file {self.config_file} not found. Using default settings.")
            return

        self.logger.debug(f"Loading configuration from {self.config_file}")

        try:
            with open(self.config_file, 'r') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML in configuration file {self.config_file}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Error reading configuration file {self.config_file}: {e}") from e

        if not config:
            self.logger.warning(f"Configuration file {self.config_file} is empty")
            return

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file {self.config_file} must contain a mapping")

        for key in config:
            if key not in ("system_path", "pretty", "log_level"):
                self.logger.warning(f"Ignoring unknown configuration key: {key}")

        if 'system_path' in config:
            self._load_system_path(config['system_path'])

        if 'pretty' in config:
            self._load_pretty(config['pretty'])

        if 'log_level' in config:
            self._load_log_level(config['log_level'])

    def _load_system_path(self, value) -> None:
        if not isinstance(value, str) or not value:
            raise ConfigError(f"system_path must be a non-empty string, got {value!r}")
        self.system_path = os.path.expanduser(value)
        self.logger.debug(f"Using system path {self.system_path}")

    def _load_pretty(self, value) -> None:
        if not isinstance(value, bool):
            raise ConfigError(f"pretty must be true or false, got {value!r}")
        self.pretty = value

    def _load_log_level(self, value) -> None:
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        self.log_level = level
