"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from podexplorer.catalog.client import DEFAULT_BASE_URL
from podexplorer.catalog.listing import DEFAULT_PAGE_SIZE, SortOrder

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class GlobalConfig(BaseModel):
    """Global Podexplorer configuration."""

    model_config = ConfigDict(validate_assignment=True)

    version: str = "1"
    catalog_base_url: HttpUrl = Field(default=HttpUrl(DEFAULT_BASE_URL))
    request_timeout: float | None = Field(default=None, gt=0)  # None: transport default
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    default_sort: SortOrder = SortOrder.NEWEST
    log_level: LogLevel = "WARNING"
    genres_file: Path | None = None  # YAML override for the built-in genre list

    @property
    def base_url(self) -> str:
        """Catalog base URL without trailing slash."""
        return str(self.catalog_base_url).rstrip("/")
