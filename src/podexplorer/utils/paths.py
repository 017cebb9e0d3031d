"""Platform-specific locations for Podexplorer files."""

from pathlib import Path

import platformdirs

APP_NAME = "podexplorer"


def get_config_dir() -> Path:
    """Get the user config directory (holds config.yaml)."""
    return Path(platformdirs.user_config_dir(APP_NAME))
