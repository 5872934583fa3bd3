"""Tests for structured logging — JSON shape and extra fields."""

import json
import logging

from pos_orders.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "pos_orders.services.order_writer", logging.ERROR, __file__, 1,
        "Error creating order: %s", ("boom",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "pos_orders.services.order_writer"
    assert log["message"] == "Error creating order: boom"
    assert "timestamp" in log


def test_json_formatter_surfaces_order_context():
    log = json.loads(JSONFormatter().format(_record(
        operation="create_order", user_id=1, customer_id=2,
        error_code="DATABASE_ERROR",
    )))
    assert log["operation"] == "create_order"
    assert log["user_id"] == 1
    assert log["customer_id"] == 2
    assert log["error_code"] == "DATABASE_ERROR"
    assert "order_id" not in log


def test_setup_logging_installs_handler():
    handler = setup_logging("debug", "text")
    try:
        assert handler in logging.root.handlers
        assert logging.root.level == logging.DEBUG
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
