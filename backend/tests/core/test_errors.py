"""Tests for the error hierarchy — codes, categories, response envelope."""

from pos_orders.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity, MalformedOrderDataError,
    OrderNotFoundError, OrderNotPersistedError, OrderValidationError, PosError,
    StoreExecutionError,
)


def test_all_errors_share_base():
    for error in (
        OrderNotFoundError(1),
        OrderNotPersistedError(),
        OrderValidationError("bad", "total_amount"),
        StoreExecutionError("boom", "execute"),
        MalformedOrderDataError("quantity must be > 0"),
    ):
        assert isinstance(error, PosError)


def test_not_found_message_and_context():
    error = OrderNotFoundError(42)
    assert str(error) == "Order not found"
    assert error.code == "ORDER_NOT_FOUND"
    assert error.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert error.context.order_id == 42


def test_store_error_keeps_caller_operation():
    error = StoreExecutionError(
        "Integrity constraint violated", "commit", ErrorContext(operation="insert"),
    )
    assert error.operation == "commit"
    assert error.context.operation == "insert"
    assert error.severity == ErrorSeverity.CRITICAL
    assert error.message == "Database commit failed: Integrity constraint violated"


def test_store_error_defaults_context_operation():
    error = StoreExecutionError("boom", "query")
    assert error.context.operation == "query"


def test_to_response_envelope():
    response = OrderNotFoundError(5, ErrorContext(operation="get_order")).to_response()
    body = response["error"]
    assert body["code"] == "ORDER_NOT_FOUND"
    assert body["message"] == "Order not found"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"] == {"order_id": 5, "operation": "get_order"}
    assert "timestamp" in body


def test_validation_error_records_field():
    error = OrderValidationError("subtotal + tax != total", "total_amount")
    assert error.field == "total_amount"
    assert error.category == ErrorCategory.VALIDATION


def test_malformed_data_error_envelope():
    error = MalformedOrderDataError(
        "quantity must be > 0", 8, ErrorContext(operation="get_order"),
    )
    assert error.code == "MALFORMED_ORDER_DATA"
    assert error.category == ErrorCategory.DATA_INTEGRITY
    assert error.detail == "quantity must be > 0"
    body = error.to_response()["error"]
    assert body["category"] == "data_integrity"
    assert body["context"] == {"order_id": 8, "operation": "get_order"}
