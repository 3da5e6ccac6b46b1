"""Tests for the app and usage loggers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


_STAMP = "20261019"
_LOGGER_NAMES = ("app", "usage", "advisor-builder")


def _drop_handlers(name: str) -> None:
    target = logging.getLogger(name)
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()


@pytest.fixture
def log_root(tmp_path, monkeypatch):
    """Point the log tree at ``tmp_path`` with fresh singletons."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: _STAMP),
    )
    for name in _LOGGER_NAMES:
        _drop_handlers(name)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)
    yield tmp_path
    for name in _LOGGER_NAMES:
        _drop_handlers(name)


def _file_paths(target: logging.Logger) -> list[str]:
    return [
        handler.baseFilename
        for handler in target.handlers
        if isinstance(handler, logging.FileHandler)
    ]


def _console_handlers(target: logging.Logger) -> list[logging.Handler]:
    return [
        handler
        for handler in target.handlers
        if not isinstance(handler, logging.FileHandler)
    ]


def test_app_logger_writes_daily_file_and_console(log_root) -> None:
    app_logger = logger_module.get_app_logger()

    expected = log_root / "logs" / "app" / f"{_STAMP}_app_logs.log"
    assert _file_paths(app_logger.logger) == [str(expected)]
    assert len(_console_handlers(app_logger.logger)) == 1
    assert app_logger.logger.propagate is False


def test_usage_logger_is_file_only(log_root) -> None:
    usage_logger = logger_module.get_usage_logger()

    expected = log_root / "logs" / "usage" / f"{_STAMP}_usage_logs.log"
    assert _file_paths(usage_logger.logger) == [str(expected)]
    assert _console_handlers(usage_logger.logger) == []


def test_usage_events_land_in_the_usage_file(log_root) -> None:
    usage_logger = logger_module.get_usage_logger()

    usage_logger.info("Analysis submitted: request=abc")
    for handler in usage_logger.logger.handlers:
        handler.flush()

    written = (
        log_root / "logs" / "usage" / f"{_STAMP}_usage_logs.log"
    ).read_text(encoding="utf-8")
    assert "| usage | INFO | Analysis submitted: request=abc" in written


def test_rebuilding_keeps_the_first_handlers(log_root) -> None:
    builder = (
        logger_module.LoggerBuilder()
        .name("advisor-builder")
        .subdir("analysis")
        .prefix("analysis_logs")
    )

    first = builder.build()
    handlers = list(first.handlers)
    second = builder.subdir("elsewhere").console(True).build()

    assert second is first
    assert second.handlers == handlers
    assert not (log_root / "logs" / "elsewhere").exists()


def test_builder_applies_level_and_formatter(log_root) -> None:
    fmt = logging.Formatter("%(levelname)s:%(message)s")

    built = (
        logger_module.LoggerBuilder()
        .name("advisor-builder")
        .level(logging.WARNING)
        .formatter(lambda: fmt)
        .build()
    )

    assert built.level == logging.WARNING
    assert all(handler.formatter is fmt for handler in built.handlers)


def test_default_handlers_log_info_with_project_format(tmp_path) -> None:
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "advisor.log",
        fmt,
    )

    assert fmt._fmt == logger_module.DEFAULT_FORMAT
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    file_handler.close()


@pytest.mark.parametrize(
    "method",
    ["debug", "info", "warning", "error", "critical", "exception"],
)
def test_app_logger_delegates_to_wrapped_logger(
    monkeypatch,
    method,
) -> None:
    wrapped = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: wrapped,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)

    getattr(logger_module.get_app_logger(), method)("Analysis failed: x")

    getattr(wrapped, method).assert_called_once_with("Analysis failed: x")


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch) -> None:
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: MagicMock(name=self._name),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
