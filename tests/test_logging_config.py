"""Tests for logging setup."""

import logging

import pytest

from cpxlens.api import analyze
from cpxlens.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    setup_logging()


class TestSetupLogging:
    """Test levels and handlers."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        logger = setup_logging(verbosity)
        assert logger.name == "cpxlens"
        assert logger.level == level

    def test_log_file_receives_records(self, tmp_path):
        log_file = tmp_path / "cpxlens.log"
        setup_logging("verbose", str(log_file))
        get_logger("complexity.tree_file").debug("walking src")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "cpxlens.complexity.tree_file - DEBUG - walking src" in log_file.read_text()

    def test_setup_replaces_handlers(self, tmp_path):
        setup_logging("normal", str(tmp_path / "a.log"))
        setup_logging("normal")
        handlers = logging.getLogger().handlers
        assert not any(isinstance(h, logging.FileHandler) for h in handlers)


class TestGetLogger:
    """Test logger naming."""

    def test_names_are_prefixed(self):
        assert get_logger("api").name == "cpxlens.api"
        assert get_logger("cpxlens.config").name == "cpxlens.config"
        assert get_logger().name == "cpxlens"


class TestAnalyzeLogging:
    """Logging follows the loaded configuration."""

    @pytest.fixture
    def workspace(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        home.mkdir()
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.chdir(tmp_path)
        for key in ("CPXLENS_VERBOSITY", "CPXLENS_LOG_FILE"):
            monkeypatch.delenv(key, raising=False)
        project = tmp_path / "project"
        project.mkdir()
        return project

    def test_verbosity_from_environment(self, workspace, monkeypatch):
        monkeypatch.setenv("CPXLENS_VERBOSITY", "verbose")
        analyze(workspace)
        assert logging.getLogger("cpxlens").level == logging.DEBUG

    def test_verbosity_from_project_file(self, workspace, tmp_path):
        (tmp_path / "cpxlens.toml").write_text('verbosity = "quiet"\n')
        analyze(workspace)
        assert logging.getLogger("cpxlens").level == logging.ERROR

    def test_flag_beats_environment(self, workspace, monkeypatch):
        monkeypatch.setenv("CPXLENS_VERBOSITY", "verbose")
        analyze(workspace, quiet=True)
        assert logging.getLogger("cpxlens").level == logging.ERROR

    def test_log_file_from_environment(self, workspace, tmp_path, monkeypatch):
        log_file = tmp_path / "run.log"
        monkeypatch.setenv("CPXLENS_VERBOSITY", "verbose")
        monkeypatch.setenv("CPXLENS_LOG_FILE", str(log_file))
        analyze(workspace)
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Starting analysis of" in log_file.read_text()
