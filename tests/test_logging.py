"""Tests for checklist.utils.logging module."""

import importlib
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

import checklist.utils.logging as logging_module


@pytest.fixture(autouse=True)
def reset_logging_module():
    """Reload the module after each test so env changes don't leak."""
    yield
    logger = logging.getLogger("checklist")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    importlib.reload(logging_module)


class TestLogging:
    """Tests for logging functionality."""

    def test_log_disabled_by_default(self):
        """Logging is disabled when CHECKLIST_LOG is not set."""
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is False

    def test_log_enabled_with_env_var(self):
        """Logging is enabled when CHECKLIST_LOG=true."""
        with patch.dict(os.environ, {"CHECKLIST_LOG": "true"}):
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is True

    def test_log_file_default_path(self):
        """Default log file is in home directory."""
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(logging_module)

            assert logging_module.LOG_FILE == Path.home() / ".checklist.log"

    def test_log_file_custom_path(self):
        """Custom log file path from environment."""
        with patch.dict(os.environ, {"CHECKLIST_LOG_FILE": "/tmp/custom-log.log"}):
            importlib.reload(logging_module)

            assert str(logging_module.LOG_FILE) == "/tmp/custom-log.log"

    def test_setup_logging_returns_logger(self):
        logging_module._logger = None
        logger = logging_module.setup_logging()

        assert logger.name == "checklist"

    def test_get_logger_returns_same_instance(self):
        logging_module._logger = None

        assert logging_module.get_logger() is logging_module.get_logger()

    def test_disabled_logging_uses_null_handler(self):
        with patch.dict(os.environ, {"CHECKLIST_LOG": "false"}):
            importlib.reload(logging_module)
            logger = logging_module.setup_logging()

        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_log_message_writes_file_when_enabled(self, tmp_path: Path):
        """log_message writes to the log file when enabled."""
        log_file = tmp_path / "logs" / "checklist.log"
        env = {"CHECKLIST_LOG": "true", "CHECKLIST_LOG_FILE": str(log_file)}
        with patch.dict(os.environ, env):
            importlib.reload(logging_module)
            logging_module.log_message("hello market")

        for handler in logging.getLogger("checklist").handlers:
            handler.flush()
        content = log_file.read_text()
        assert "hello market" in content
        assert content.startswith("[")
