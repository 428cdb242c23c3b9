"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    LibraryError,
    NotFoundError,
    ValidationError,
    InvalidIdentifierError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
)


class TestLibraryError:
    def test_library_error_message(self):
        """LibraryError should store message."""
        error = LibraryError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_library_error_default_code(self):
        """LibraryError should default code to class name."""
        assert LibraryError("Test error").code == "LibraryError"

    def test_library_error_custom_code_and_details(self):
        error = LibraryError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_to_dict_hides_code_and_details(self):
        """Only the message reaches the client."""
        error = LibraryError("Test error", code="TEST_ERROR", details={"key": "value"})
        assert error.to_dict() == {"error": "Test error"}


class TestStatusCodes:
    def test_status_codes(self):
        assert LibraryError("x").status_code == 500
        assert ValidationError().status_code == 400
        assert InvalidIdentifierError().status_code == 400
        assert AuthenticationError("x").status_code == 401
        assert AuthorizationError("x").status_code == 403
        assert NotFoundError("x").status_code == 404
        assert ConflictError("x").status_code == 400
        assert InternalError().status_code == 500

    def test_inheritance(self):
        assert issubclass(InvalidIdentifierError, ValidationError)
        for cls in (ValidationError, NotFoundError, AuthenticationError, ConflictError):
            assert issubclass(cls, LibraryError)


class TestValidationError:
    def test_field_errors_in_body(self):
        error = ValidationError(field_errors={"year": "Year must be between 1800 and 2031"})
        assert error.to_dict() == {
            "error": "Validation failed",
            "fieldErrors": {"year": "Year must be between 1800 and 2031"},
        }

    def test_no_field_errors_key_when_empty(self):
        assert ValidationError("Item ID required").to_dict() == {"error": "Item ID required"}

    def test_invalid_identifier_keeps_value_in_details(self):
        error = InvalidIdentifierError("Invalid user ID", value="abc")
        assert error.to_dict() == {"error": "Invalid user ID"}
        assert error.details == {"value": "abc"}


class TestInternalError:
    def test_never_leaks_message(self):
        error = InternalError("connection refused to 10.0.0.5", details={"host": "db"})
        assert error.to_dict() == {"error": "Internal server error"}
