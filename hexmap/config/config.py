# hexmap/config/config.py

import copy
import logging
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from . import defaults

logger = logging.getLogger(__name__)


class Config:
    """Configuration manager with YAML override support."""

    ENV_VAR = 'HEXMAP_CONFIG'

    def __init__(self, config_file: Optional[Path] = None):
        self.settings = self.load_defaults()
        self.config_file: Optional[Path] = None

        if config_file is None:
            config_file = self._find_config_file()
        elif not isinstance(config_file, Path):
            config_file = Path(config_file)

        if config_file and config_file.exists():
            try:
                self.load(config_file)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Config file loading failed: {e} - using defaults")
        else:
            logger.debug("No config.yml found - using defaults only")

    def _find_config_file(self) -> Optional[Path]:
        """Find config.yml with multiple fallback locations."""
        env_path = os.environ.get(self.ENV_VAR)
        if env_path:
            return Path(env_path)

        potential_locations = [
            defaults.PROJECT_ROOT / 'config.yml',
            Path.cwd() / 'config.yml',
            Path.home() / '.hexmap' / 'config.yml',
        ]

        for location in potential_locations:
            if location.exists() and location.is_file():
                return location

        return None

    def load_defaults(self) -> Dict[str, Any]:
        """Load default configuration settings."""
        return {
            'grids': copy.deepcopy(defaults.GRIDS),
            'mock_data': defaults.MOCK_DATA.copy(),
            'logging': defaults.LOGGING.copy()
        }

    def load(self, config_file: Path):
        """Merge settings from an explicit YAML file into this instance."""
        config_file = Path(config_file)
        self._load_yaml_config(config_file)
        self.config_file = config_file
        logger.debug(f"Loaded configuration from {config_file}")

    def _load_yaml_config(self, config_file: Path):
        """Load and merge configuration from a YAML file."""
        with open(config_file, 'r') as file:
            yaml_config = yaml.safe_load(file)
            if yaml_config:
                if not isinstance(yaml_config, dict):
                    raise yaml.YAMLError(
                        f"Top level of {config_file} must be a mapping, got {type(yaml_config).__name__}"
                    )
                self._deep_merge(self.settings, yaml_config)

    def _deep_merge(self, base: dict, override: dict):
        """Deep merge override into base dictionary."""
        for key, value in override.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        keys = key.split(".")
        value = self.settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    @property
    def grids(self) -> Dict[str, Any]:
        return self.settings.get('grids', {})

    @property
    def mock_data(self) -> Dict[str, Any]:
        return self.settings.get('mock_data', {})

    @property
    def logging(self) -> Dict[str, Any]:
        return self.settings.get('logging', {})


# Global config instance
config = Config()
