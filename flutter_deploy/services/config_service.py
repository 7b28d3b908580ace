"""Configuration management service"""

import logging
import os
from pathlib import Path

import yaml

from ..api.exceptions import ConfigError
from ..models.config import DeployConfig
from ..utils.file_utils import stat_path


class ConfigService:
    """Service for loading the optional .flutter-deploy.yaml"""

    def __init__(self, config_path: Path):
        """Initialize config service

        Args:
            config_path: Location of the configuration file
        """
        self.config_path = Path(config_path)
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_config(self) -> DeployConfig:
        """Load configuration from file

        A missing file yields the defaults.

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        try:
            info = stat_path(self.config_path)
        except OSError as e:
            raise ConfigError(f"Cannot access {self.config_path}: {e}") from e

        if info is None:
            self.logger.debug(f"No configuration at {self.config_path}, using defaults")
            return DeployConfig()

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"Cannot read {self.config_path}: {e}") from e

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        config = DeployConfig.from_dict(data)
        self.logger.debug(f"Loaded configuration from {self.config_path}")

        return config

