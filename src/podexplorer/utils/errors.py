"""Custom exceptions for Podexplorer."""


class PodExplorerError(Exception):
    """Base exception for all Podexplorer errors."""

    pass


class ConfigError(PodExplorerError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class GenreDataError(PodExplorerError):
    """Genre reference data could not be loaded."""

    pass


class CatalogError(PodExplorerError):
    """Base error for catalog fetch failures.

    Attributes:
        message: Display-ready message for the view layer
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class HttpError(CatalogError):
    """Catalog API answered with a non-success status."""

    def __init__(self, status: int, message: str | None = None) -> None:
        super().__init__(message if message is not None else str(status))
        self.status = status


class NotFoundError(CatalogError):
    """Requested show does not exist (HTTP 404)."""

    def __init__(self, message: str = "Show not found.") -> None:
        super().__init__(message)
        self.status = 404


class TransportError(CatalogError):
    """Network failure or unparseable response body."""

    pass
