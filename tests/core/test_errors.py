"""Error Hierarchy — status codes and log fields per error type."""

from postboard.core.errors import (
    DatabaseError, ErrorCategory, ErrorContext, ParameterValidationError,
    PostboardError,
)


def test_validation_error_is_400():
    err = ParameterValidationError("bad id", "id")
    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION
    assert err.field == "id"


def test_database_error_is_500():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 500
    assert err.operation == "execute"
    assert isinstance(err, PostboardError)


def test_log_extra_carries_context():
    err = ParameterValidationError(
        "bad id", "id", ErrorContext(operation="/posts.like"),
    )
    extra = err.to_log_extra()
    assert extra["error_code"] == "VALIDATION_ERROR"
    assert extra["operation"] == "/posts.like"


def test_log_extra_is_exactly_code_and_operation():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.to_log_extra() == {"error_code": "DATABASE_ERROR", "operation": None}
