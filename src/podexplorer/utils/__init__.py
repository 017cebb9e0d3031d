"""Utility functions and helpers for Podexplorer."""

from podexplorer.utils.errors import (
    CatalogError,
    ConfigError,
    GenreDataError,
    HttpError,
    InvalidConfigError,
    NotFoundError,
    PodExplorerError,
    TransportError,
)
from podexplorer.utils.paths import get_config_dir

__all__ = [
    # Errors
    "PodExplorerError",
    "ConfigError",
    "InvalidConfigError",
    "GenreDataError",
    "CatalogError",
    "HttpError",
    "NotFoundError",
    "TransportError",
    # Paths
    "get_config_dir",
]
