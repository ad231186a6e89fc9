"""
Tests for the loguru sink configuration.
"""

import sys

import pytest
from loguru import logger

from common.logging import log_file_paths, setup_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestLogFilePaths:
    """Test log file naming."""

    def test_named_service(self, tmp_path):
        """Test that files are named after the service."""
        paths = log_file_paths(tmp_path, "content-service")

        assert paths["ALL"] == tmp_path / "content-service.log"
        assert paths["ERROR"] == tmp_path / "content-service-error.log"

    def test_unnamed_service(self, tmp_path):
        """Test the generic file names used without a service name."""
        paths = log_file_paths(tmp_path)

        assert paths["ALL"] == tmp_path / "app.log"
        assert paths["ERROR"] == tmp_path / "error.log"


class TestSetupLogging:
    """Test setup_logging against a temporary log directory."""

    def test_errors_reach_both_files(self, tmp_path, monkeypatch, restore_logger):
        """Test that an error lands in both sinks and info only in the general one."""
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("LOG_DIR", str(log_dir))

        paths = setup_logging("content-service")
        logger.info("visit recorded")
        logger.error("store unavailable")
        logger.complete()

        general = paths["ALL"].read_text()
        errors = paths["ERROR"].read_text()
        assert "visit recorded" in general
        assert "store unavailable" in general
        assert "store unavailable" in errors
        assert "visit recorded" not in errors

    def test_log_level_filters_general_file(self, tmp_path, monkeypatch, restore_logger):
        """Test that LOG_LEVEL applies to the general file sink."""
        monkeypatch.setenv("LOG_DIR", str(tmp_path))
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        paths = setup_logging("content-service")
        logger.info("quiet")
        logger.warning("loud")

        general = paths["ALL"].read_text()
        assert "loud" in general
        assert "quiet" not in general
