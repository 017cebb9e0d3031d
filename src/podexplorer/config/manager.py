"""Configuration manager for loading and saving Podexplorer config."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from podexplorer.config.defaults import DEFAULT_GLOBAL_CONFIG, get_default_config_content
from podexplorer.config.schema import GlobalConfig
from podexplorer.utils.errors import ConfigError, InvalidConfigError
from podexplorer.utils.paths import get_config_dir

BASE_URL_ENV_VAR = "PODEXPLORER_BASE_URL"


class ConfigManager:
    """Manages the Podexplorer configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to the
                platform user config dir.
        """
        self.config_dir = config_dir if config_dir is not None else get_config_dir()
        self.config_file = self.config_dir / "config.yaml"

    def load_config(self, apply_env: bool = True) -> GlobalConfig:
        """Load and validate global configuration.

        Args:
            apply_env: Let ``PODEXPLORER_BASE_URL`` override ``catalog_base_url``

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self._create_default_config()
            config = DEFAULT_GLOBAL_CONFIG.model_copy()
        else:
            try:
                with open(self.config_file) as f:
                    data = yaml.safe_load(f) or {}
                config = GlobalConfig(**data)
            except Exception as e:
                raise InvalidConfigError(
                    f"Invalid configuration in {self.config_file}: {e}"
                ) from e

        env_url = os.environ.get(BASE_URL_ENV_VAR)
        if apply_env and env_url:
            try:
                config.catalog_base_url = env_url
            except ValidationError as e:
                raise InvalidConfigError(f"Invalid {BASE_URL_ENV_VAR}: {env_url}") from e

        return config

    def save_config(self, config: GlobalConfig) -> None:
        """Save global configuration.

        Args:
            config: GlobalConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def set_value(self, key: str, value: str) -> GlobalConfig:
        """Set a single configuration value from its string form.

        Args:
            key: Field name in GlobalConfig
            value: Raw value; "null"/"none" clears optional fields

        Returns:
            Updated and saved configuration

        Raises:
            ConfigError: If key is unknown
            InvalidConfigError: If value fails validation
        """
        if key not in GlobalConfig.model_fields:
            raise ConfigError(f"Unknown config key: {key}")

        config = self.load_config(apply_env=False)
        converted: Any = None if value.lower() in ("null", "none") else value

        try:
            setattr(config, key, converted)
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid value for {key}: {value}") from e

        self.save_config(config)
        return config

    def _create_default_config(self) -> None:
        """Create default config.yaml file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())
