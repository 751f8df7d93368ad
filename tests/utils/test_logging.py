import logging

import pytest

from errormap import ValidationResult, validate_entity
from errormap.utils.logging import (
    clear_correlation_id,
    configure_logging,
    get_correlation_id,
    get_logger,
    set_correlation_id,
    time_call,
)


def test_correlation_id_round_trip():
    token = set_correlation_id("test-token")
    assert token == "test-token"
    assert get_correlation_id() == "test-token"


def test_correlation_id_regenerated_after_clear():
    set_correlation_id("old-token")
    clear_correlation_id()
    assert get_correlation_id() != "old-token"


def test_time_call_logs_duration(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("unit-test", logger, threshold_ms=0):
        pass
    messages = [record.message for record in caplog.records if record.name == logger.name]
    assert any("unit-test took" in message for message in messages)


def test_validate_entity_logs_summary(caplog):
    class Empty:
        def validate(self, entity):
            result = ValidationResult()
            result.add_failure("name", "Required")
            return result

    caplog.set_level(logging.DEBUG, logger="errormap.mapping")
    validate_entity(Empty(), {"name": ""})
    messages = [record.message for record in caplog.records if record.name == "errormap.mapping"]
    assert any("validate_entity took" in message for message in messages)
    assert any("1 field(s) in error" in message for message in messages)


@pytest.fixture
def fresh_package_logger():
    logger = logging.getLogger("errormap")
    handlers = list(logger.handlers)
    level = logger.level
    for handler in handlers:
        logger.removeHandler(handler)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def test_configure_logging_level_applies_after_setup(fresh_package_logger):
    configure_logging()
    configure_logging(logging.DEBUG)
    assert fresh_package_logger.level == logging.DEBUG
    assert len(fresh_package_logger.handlers) == 1


def test_log_level_from_env(monkeypatch, fresh_package_logger):
    monkeypatch.setenv("ERRORMAP_LOG_LEVEL", "warning")
    configure_logging()
    assert fresh_package_logger.level == logging.WARNING


def test_unknown_log_level_falls_back_to_info(monkeypatch, fresh_package_logger):
    monkeypatch.setenv("ERRORMAP_LOG_LEVEL", "chatty")
    configure_logging()
    assert fresh_package_logger.level == logging.INFO


def test_explicit_level_wins_over_env(monkeypatch, fresh_package_logger):
    monkeypatch.setenv("ERRORMAP_LOG_LEVEL", "ERROR")
    configure_logging(logging.DEBUG)
    assert fresh_package_logger.level == logging.DEBUG
