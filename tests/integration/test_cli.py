"""Integration tests for general CLI commands."""

import os
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from podexplorer import __version__
from podexplorer.cli import app
from podexplorer.config.manager import BASE_URL_ENV_VAR

# Disable Rich formatting in tests for consistent output across environments
os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.setattr("podexplorer.config.manager.get_config_dir", lambda: tmp_path)
    monkeypatch.delenv(BASE_URL_ENV_VAR, raising=False)
    return tmp_path


class TestVersionCommand:
    """Tests for `podexplorer version`."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestConfigCommand:
    """Tests for `podexplorer config`."""

    def test_show(self, isolated_config: Path) -> None:
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "podcast-api.netlify.app" in result.stdout
        assert "newest" in result.stdout

    def test_set(self, isolated_config: Path) -> None:
        result = runner.invoke(app, ["config", "set", "page_size", "20"])

        assert result.exit_code == 0
        data = yaml.safe_load((isolated_config / "config.yaml").read_text())
        assert data["page_size"] == 20

    def test_set_unknown_key(self) -> None:
        result = runner.invoke(app, ["config", "set", "colour", "blue"])

        assert result.exit_code == 1
        assert "Unknown config key" in result.stdout
        assert "page_size" in result.stdout

    def test_set_invalid_value(self) -> None:
        result = runner.invoke(app, ["config", "set", "default_sort", "random"])

        assert result.exit_code == 1
        assert "Invalid value" in result.stdout

    def test_set_missing_value(self) -> None:
        result = runner.invoke(app, ["config", "set", "page_size"])
        assert result.exit_code == 1

    def test_unknown_action(self) -> None:
        result = runner.invoke(app, ["config", "explode"])
        assert result.exit_code == 1
        assert "Unknown action" in result.stdout

    def test_invalid_config_file(self, isolated_config: Path) -> None:
        (isolated_config / "config.yaml").write_text(yaml.safe_dump({"page_size": "lots"}))

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout
