"""Unit tests for the command-line interface."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from placefinder.interfaces.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring structlog against the runner's streams."""
    with patch("placefinder.interfaces.cli.configure_logging"):
        yield


class TestSearchCommand:
    """Test the search command."""

    def test_search_with_live_position(self, static_config_file):
        result = runner.invoke(
            app, ["search", "cafe", "--lat", "14.5995", "--lon", "120.9842", "--config", str(static_config_file)]
        )

        assert result.exit_code == 0, result.stdout
        assert "live location" in result.stdout
        assert "Corner Cafe" in result.stdout
        assert "1 kilometer" in result.stdout
        assert "50 meters" in result.stdout
        assert result.stdout.index("Tea") < result.stdout.index("Corner Cafe")

    def test_search_without_location_fails(self, static_config_file):
        result = runner.invoke(app, ["search", "cafe", "--config", str(static_config_file)])

        assert result.exit_code == 1
        assert "No saved or live location" in result.stdout

    def test_lat_without_lon_rejected(self, static_config_file):
        result = runner.invoke(app, ["search", "cafe", "--lat", "1.0", "--config", str(static_config_file)])

        assert result.exit_code == 1
        assert "--lat and --lon must be given together" in result.stdout


class TestSaveAndLoadCommands:
    """Test save and load commands against a SQLite store."""

    def test_load_without_saved_location(self, static_config_file):
        result = runner.invoke(app, ["load", "--config", str(static_config_file)])

        assert result.exit_code == 0
        assert "No saved location" in result.stdout

    def test_save_then_load_then_search(self, static_config_file):
        saved = runner.invoke(
            app, ["save", "--lat", "10.5", "--lon", "20.25", "--config", str(static_config_file)]
        )
        assert saved.exit_code == 0, saved.stdout
        assert "Saved current location 10.5, 20.25" in saved.stdout

        loaded = runner.invoke(app, ["load", "--config", str(static_config_file)])
        assert loaded.exit_code == 0
        assert "Loaded saved location 10.5, 20.25" in loaded.stdout

        searched = runner.invoke(
            app, ["search", "cafe", "--lat", "1.0", "--lon", "2.0", "--config", str(static_config_file)]
        )
        assert searched.exit_code == 0
        assert "10.5, 20.25 (persisted location)" in searched.stdout

    def test_save_without_location_fails(self, static_config_file):
        result = runner.invoke(app, ["save", "--config", str(static_config_file)])

        assert result.exit_code == 1
        assert "Failed to save location" in result.stdout


def test_info(static_config_file):
    result = runner.invoke(app, ["info", "--config", str(static_config_file)])

    assert result.exit_code == 0
    assert "static" in result.stdout
    assert "disabled" in result.stdout
