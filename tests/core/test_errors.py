"""Error hierarchy — status codes, categories and the REST envelope."""

import pytest

from fincalc.core.errors import (
    AuthenticationError,
    BackendTimeoutError,
    DuplicateEmailError,
    ErrorCategory,
    ErrorContext,
    FinCalcError,
    InternalError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.parametrize("error,status,code", [
    (ValidationError("bad", "income"), 400, "VALIDATION_ERROR"),
    (DuplicateEmailError("a@b.c"), 409, "DUPLICATE_EMAIL"),
    (NotFoundError("Account", 9), 404, "RESOURCE_NOT_FOUND"),
    (AuthenticationError(), 401, "INVALID_CREDENTIALS"),
    (BackendTimeoutError("account.create", 2.0), 504, "BACKEND_TIMEOUT"),
    (InternalError("account.insert"), 500, "INTERNAL_ERROR"),
])
def test_error_status_and_code(error, status, code):
    assert isinstance(error, FinCalcError)
    assert error.http_status == status
    assert error.code == code


def test_to_response_envelope():
    ctx = ErrorContext(user_id=3, operation="profile.create")
    body = ValidationError("income must be a number", "income", ctx).to_response()
    err = body["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert err["category"] == "validation"
    assert err["message"] == "income must be a number"
    assert err["context"] == {"user_id": 3, "operation": "profile.create"}
    assert "timestamp" in err


def test_internal_error_message_is_opaque():
    err = InternalError("account.insert")
    assert err.message == "An unexpected error occurred"
    assert "account.insert" not in err.message
    assert err.context.operation == "account.insert"
    assert err.category == ErrorCategory.INTERNAL


def test_timeout_is_distinguishable_from_internal_error():
    err = BackendTimeoutError("profile.list_by_user", 0.5)
    assert not isinstance(err, InternalError)
    assert err.category == ErrorCategory.TIMEOUT
    assert err.timeout_seconds == 0.5


def test_not_found_message_names_resource():
    assert NotFoundError("Account", 42).message == "Account '42' not found"


def test_duplicate_email_does_not_echo_email_in_message():
    err = DuplicateEmailError("someone@example.com")
    assert "someone@example.com" not in err.message
    assert err.email == "someone@example.com"
