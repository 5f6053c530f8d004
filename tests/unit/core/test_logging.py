"""
Unit Tests for Logging Setup.

Tests handler selection from the logging config section, overrides and
explicit source tagging.
"""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock, patch

import pytest

from notes_api.core import logging as logging_module
from notes_api.core.config_schema import LoggingSchema


@pytest.fixture(autouse=True)
def _reset_root_handlers():
    yield
    for handler in logging.getLogger().handlers[:]:
        logging.getLogger().removeHandler(handler)


def _config(
    console_enabled: bool = True,
    file_enabled: bool = False,
    path: str = "logs/test.jsonl",
) -> LoggingSchema:
    return LoggingSchema(
        level="INFO",
        format="json",
        handlers={
            "console": {"enabled": console_enabled},
            "file": {
                "enabled": file_enabled,
                "path": path,
                "max_bytes": 1024,
                "backup_count": 1,
            },
        },
    )


class TestSetupLogging:
    def test_uses_configured_level(self):
        logging_module.setup_logging(config=_config())

        assert logging.getLogger().level == logging.INFO

    def test_level_override(self):
        logging_module.setup_logging(level="debug", config=_config())

        assert logging.getLogger().level == logging.DEBUG

    def test_defaults_to_app_config(self):
        logging_module.setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_console_disabled(self):
        logging_module.setup_logging(config=_config(console_enabled=False))

        assert logging.getLogger().handlers == []

    def test_repeated_setup_replaces_handlers(self):
        logging_module.setup_logging(config=_config())
        logging_module.setup_logging(config=_config())

        assert len(logging.getLogger().handlers) == 1

    def test_file_handler(self, tmp_path):
        with patch.object(logging_module, "find_project_root", return_value=tmp_path):
            logging_module.setup_logging(
                config=_config(console_enabled=False, file_enabled=True),
            )

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert handlers[0].maxBytes == 1024
        assert (tmp_path / "logs").is_dir()
        handlers[0].close()

    def test_quiets_uvicorn_access_log(self):
        logging_module.setup_logging(config=_config())

        assert logging.getLogger("uvicorn.access").level == logging.WARNING


class TestLogWithSource:
    def test_passes_source_and_fields(self):
        logger = MagicMock()

        logging_module.log_with_source(logger, "cli", "INFO", "API request", path="/notes")

        logger.info.assert_called_once_with("API request", source="cli", path="/notes")

    def test_invalid_level_raises(self):
        logger = MagicMock(spec=["info"])

        with pytest.raises(AttributeError):
            logging_module.log_with_source(logger, "cli", "shout", "Message")
