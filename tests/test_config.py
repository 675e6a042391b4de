from __future__ import annotations

import logging

import pytest

from workout_sequencer.config import get_settings
from workout_sequencer.logging_config import configure_logging
from workout_sequencer.models import PlanItem


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_default_fallbacks_follow_settings(monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
    monkeypatch.setenv("DEFAULT_REST_SECONDS", "90")
    monkeypatch.setenv("DEFAULT_TOTAL_SETS", "2")
    item = PlanItem.model_validate({"name": "a", "restSeconds": "bad"})
    assert item.rest_seconds == 90
    assert item.total_sets == 2


def test_configure_logging_uses_level(monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    package_logger = logging.getLogger("workout_sequencer")
    handlers, level = list(package_logger.handlers), package_logger.level
    try:
        logger = configure_logging()
        assert logger.level == logging.DEBUG
        assert configure_logging("warning").level == logging.WARNING
        assert len(logger.handlers) == max(1, len(handlers))
    finally:
        package_logger.handlers[:] = handlers
        package_logger.setLevel(level)
