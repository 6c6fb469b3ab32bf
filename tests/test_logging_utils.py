"""Logging facade: StructuredLogger over the standard library.

Tests cover:
    - Level mapping (trace -> DEBUG, warn -> WARNING)
    - Lazy %-style templates and exception attachment
    - Context variables attached to records
    - log_operation for sync and async callables
    - configure_logging handlers
"""

import logging

import pytest

from buildingblocks.config.settings import LoggingSettings
from buildingblocks.services.interfaces import IAppLogger
from buildingblocks.utils.logging_utils import (
    StructuredLogger,
    configure_logging,
    get_logger,
    get_logging_context,
    log_operation,
    set_logging_context,
)
from sample_domain import Customer


def test_get_logger_names_logger_after_class():
    logger = get_logger(Customer)
    assert isinstance(logger, IAppLogger)
    assert logger.name == "sample_domain.Customer"
    assert get_logger("custom.name").name == "custom.name"


def test_levels_map_to_standard_library(trace_logs):
    logger = StructuredLogger("tests.levels")

    logger.trace("t %s", 1)
    logger.info("i %s", 2)
    logger.warn("w %s", 3)
    logger.error(None, "e %s", 4)

    records = [r for r in trace_logs.records if r.name == "tests.levels"]
    assert [(r.levelno, r.getMessage()) for r in records] == [
        (logging.DEBUG, "t 1"),
        (logging.INFO, "i 2"),
        (logging.WARNING, "w 3"),
        (logging.ERROR, "e 4"),
    ]


def test_error_attaches_exception(trace_logs):
    logger = StructuredLogger("tests.errors")
    try:
        raise ValueError("boom")
    except ValueError as e:
        logger.error(e, "Failed to process %s", "order")

    (record,) = [r for r in trace_logs.records if r.name == "tests.errors"]
    assert record.getMessage() == "Failed to process order"
    assert record.exc_info[0] is ValueError


def test_context_is_attached_to_records(trace_logs):
    set_logging_context(request_id="abc-123")
    set_logging_context(user_id="alice")

    StructuredLogger("tests.context").info("hello")

    (record,) = [r for r in trace_logs.records if r.name == "tests.context"]
    assert record.context == {"request_id": "abc-123", "user_id": "alice"}
    assert get_logging_context() == {"request_id": "abc-123", "user_id": "alice"}


def test_log_operation_sync(trace_logs):
    @log_operation("sum")
    def add(a, b, topic=None):
        return a + b

    assert add(1, 2, topic="sensors") == 3
    messages = [r.getMessage() for r in trace_logs.records]
    assert "Starting sum (topic=sensors)" in messages
    assert "Completed sum (topic=sensors)" in messages


@pytest.mark.asyncio
async def test_log_operation_async_logs_and_reraises(trace_logs):
    @log_operation("publish")
    async def fail(entity_id=None):
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        await fail(entity_id="42")

    errors = [r for r in trace_logs.records if r.levelno == logging.ERROR]
    assert errors[-1].getMessage() == "Failed publish (entity_id=42): RuntimeError"


def test_configure_logging_installs_console_and_file_handlers(tmp_path):
    log_file = tmp_path / "app.log"
    root = configure_logging(LoggingSettings(level="debug", log_file=str(log_file)))
    try:
        ours = [h for h in root.handlers if getattr(h, "_buildingblocks", False)]
        assert len(ours) == 2
        assert root.level == logging.DEBUG

        # Reconfiguring replaces rather than duplicates handlers
        root = configure_logging(LoggingSettings(level="warn"))
        ours = [h for h in root.handlers if getattr(h, "_buildingblocks", False)]
        assert len(ours) == 1
        assert root.level == logging.WARNING
        assert "Logging initialized" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in [h for h in root.handlers if getattr(h, "_buildingblocks", False)]:
            root.removeHandler(handler)
            handler.close()
        root.setLevel(logging.WARNING)
