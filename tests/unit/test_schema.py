"""Tests for configuration schema models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from podexplorer.catalog.listing import SortOrder
from podexplorer.config.schema import GlobalConfig


class TestGlobalConfig:
    """Tests for GlobalConfig model."""

    def test_defaults(self) -> None:
        config = GlobalConfig()
        assert config.version == "1"
        assert config.base_url == "https://podcast-api.netlify.app"
        assert config.request_timeout is None
        assert config.page_size == 12
        assert config.default_sort is SortOrder.NEWEST
        assert config.log_level == "WARNING"
        assert config.genres_file is None

    def test_base_url_strips_trailing_slash(self) -> None:
        config = GlobalConfig(catalog_base_url="https://catalog.example.com/api/")
        assert config.base_url == "https://catalog.example.com/api"

    def test_invalid_url(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig(catalog_base_url="ftp-ish nonsense")

    def test_page_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig(page_size=0)

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig(request_timeout=0)

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig(log_level="TRACE")  # type: ignore

    def test_assignment_is_validated(self) -> None:
        config = GlobalConfig()
        with pytest.raises(ValidationError):
            config.page_size = -1

    def test_genres_file_path(self) -> None:
        config = GlobalConfig(genres_file="~/genres.yaml")
        assert config.genres_file == Path("~/genres.yaml")
