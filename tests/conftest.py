"""Shared test fixtures for the SOLID principles demos."""

import logging

import pytest

from solid_principles.notifications import MessageChannel


class RecordingChannel(MessageChannel):
    """Channel that keeps every emitted record."""

    def __init__(self):
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def channel():
    """Fresh recording channel."""
    return RecordingChannel()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers and level that setup_logging attached during a test."""
    yield
    logger = logging.getLogger("solid_principles")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
