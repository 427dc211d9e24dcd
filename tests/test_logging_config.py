"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from solid_principles.logging_config import PACKAGE_LOGGER, setup_logging


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        logger = setup_logging(verbosity)
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == level

    def test_rich_handler_on_package_logger(self):
        logger = setup_logging()
        assert any(isinstance(h, RichHandler) for h in logger.handlers)
        assert not any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)

    def test_repeat_calls_replace_handlers(self):
        setup_logging("verbose")
        logger = setup_logging("quiet")
        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR

    def test_log_file_receives_module_records(self, tmp_path):
        log_file = tmp_path / "demo.log"
        setup_logging("verbose", str(log_file))

        logging.getLogger("solid_principles.reports.file_manager").debug("Opened %s", "r.txt")

        text = log_file.read_text(encoding="utf-8")
        assert "DEBUG solid_principles.reports.file_manager: Opened r.txt" in text

    def test_unknown_verbosity(self):
        with pytest.raises(KeyError):
            setup_logging("loud")
