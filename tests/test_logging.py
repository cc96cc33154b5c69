import logging

import pytest

from photofilter.utils.logging import PACKAGE_LOGGER, get_logger, parse_level, set_level


def test_package_logger_is_configured_once() -> None:
    first = get_logger()
    second = get_logger()
    assert first is second
    assert first.name == PACKAGE_LOGGER
    assert len(first.handlers) == 1


def test_named_loggers_are_package_children() -> None:
    package = get_logger()
    child = get_logger("notify")
    assert child.name == "photofilter.notify"
    assert child.parent is package
    assert child.handlers == []
    assert get_logger("photofilter.notify") is child


def test_parse_level_accepts_names_and_numbers() -> None:
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warning ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        parse_level("CHATTY")
    with pytest.raises(ValueError):
        parse_level(True)


def test_set_level_reaches_module_loggers() -> None:
    package = get_logger()
    previous = package.level
    try:
        set_level("ERROR")
        module_logger = logging.getLogger("photofilter.core.export")
        assert module_logger.getEffectiveLevel() == logging.ERROR
    finally:
        package.setLevel(previous)


def test_notifications_go_to_notify_logger(caplog: pytest.LogCaptureFixture) -> None:
    from photofilter.core.export import log_notification

    caplog.set_level(logging.INFO, logger=PACKAGE_LOGGER)
    log_notification("Image saved")
    assert [(record.name, record.getMessage()) for record in caplog.records] == [
        ("photofilter.notify", "Image saved")
    ]
