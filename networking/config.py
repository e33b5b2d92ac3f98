"""
Client Configuration Handler

Manages YAML configuration file for the API client.
Provides defaults and validation.

Precedence (lowest first): built-in defaults, config/client.yaml,
environment variables that are set.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml

from config.settings import (
    CLIENT_CONFIG_PATH,
    CLIENT_ENV_OVERRIDES,
    DEFAULT_ADD_TASK_PATH,
    DEFAULT_API_MODE,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_WORKERS,
)
from networking.constants import API_MODES


class ClientConfig:
    """
    API client configuration with YAML file support.

    Reads from config/client.yaml if it exists, on top of the defaults
    in config.settings. TASKIE_* environment variables win over both.

    Usage:
        config = ClientConfig()
        base_url = config.base_url
        mode = config.api_mode
    """

    DEFAULT_CONFIG_PATH = CLIENT_CONFIG_PATH

    def __init__(self, config_path: Optional[Path] = None, create_if_missing: bool = False):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = use default)
            create_if_missing: Write a default file when none exists
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or self.DEFAULT_CONFIG_PATH)
        self.create_if_missing = create_if_missing

        # Load configuration (defaults + file + environment)
        self._config = self._load_config()

        self.logger.debug(f"Client config loaded from {self.config_path}")

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            'base_url': DEFAULT_BASE_URL,
            'api_mode': DEFAULT_API_MODE,
            'add_task_path': DEFAULT_ADD_TASK_PATH,
            'max_workers': DEFAULT_MAX_WORKERS,
        }

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Values from TASKIE_* environment variables that are set"""
        return {
            key: os.environ[name]
            for key, name in CLIENT_ENV_OVERRIDES.items()
            if os.environ.get(name)
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from defaults, YAML file and environment"""
        config = self._get_defaults()

        if self.config_path.exists():
            config.update(self._read_file())
        elif self.create_if_missing:
            self.logger.info(
                f"Config file not found at {self.config_path}. "
                f"Using defaults. Creating default config file..."
            )
            self._save_config(config)

        # Environment beats the file
        config.update(self._get_env_overrides())

        self._validate_config(config)

        return config

    def _read_file(self) -> Dict[str, Any]:
        """Read overrides from the YAML file ({} if unusable)"""
        try:
            with open(self.config_path, 'r') as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self.logger.warning(
                f"Failed to load config from {self.config_path}: {e}. "
                f"Using defaults."
            )
            return {}

        if not isinstance(file_config, dict):
            self.logger.warning(
                f"Config file {self.config_path} is not a mapping "
                f"(got {type(file_config).__name__}). Using defaults."
            )
            return {}

        self.logger.info(f"Loaded config from {self.config_path}")
        return file_config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        base_url = config['base_url'] or ""
        parsed = urlparse(base_url)
        if config['api_mode'] != 'mock' and (
            parsed.scheme not in ('http', 'https') or not parsed.netloc
        ):
            raise ValueError(f"base_url must be an absolute http(s) URL: {base_url!r}")

        if config['api_mode'] not in API_MODES:
            raise ValueError(
                f"api_mode must be one of {API_MODES}: {config['api_mode']!r}"
            )

        if not str(config['add_task_path']).startswith('/'):
            raise ValueError(f"add_task_path must start with '/': {config['add_task_path']}")

        if int(config['max_workers']) < 1:
            raise ValueError("max_workers must be at least 1")

    def _save_config(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Save configuration to YAML file"""
        if config is None:
            config = self._config

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w') as f:
                yaml.dump(
                    config,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2
                )

            self.logger.info(f"Config saved to {self.config_path}")

        except OSError as e:
            self.logger.error(f"Failed to save config: {e}")

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def base_url(self) -> str:
        """Backend root URL"""
        return self._config['base_url']

    @property
    def api_mode(self) -> str:
        """Service mode: auto, http or mock"""
        return self._config['api_mode']

    @property
    def add_task_path(self) -> str:
        """Endpoint used to create tasks"""
        return self._config['add_task_path']

    @property
    def max_workers(self) -> int:
        """Background threads for AsyncRemoteApi"""
        return int(self._config['max_workers'])

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: New value
            save: If True, save to file immediately
        """
        self._config[key] = value

        if save:
            self._save_config()

    def reload(self) -> None:
        """Reload configuration from file"""
        self._config = self._load_config()
        self.logger.info("Configuration reloaded")

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as dictionary"""
        return self._config.copy()

    def __repr__(self) -> str:
        return f"ClientConfig(path={self.config_path})"
