"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    AccountsError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    ExternalServiceError,
    StoreError,
    DuplicateKeyError,
)


class TestAccountsError:
    def test_accounts_error_message(self):
        """AccountsError should store message."""
        error = AccountsError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_accounts_error_default_code(self):
        """AccountsError should default code to class name."""
        error = AccountsError("Test error")
        assert error.code == "AccountsError"

    def test_accounts_error_custom_code(self):
        """AccountsError should accept custom code."""
        error = AccountsError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_accounts_error_default_details(self):
        """AccountsError should default details to empty dict."""
        error = AccountsError("Test error")
        assert error.details == {}

    def test_accounts_error_custom_details(self):
        error = AccountsError("Test error", code="TEST_ERROR", details={"key": "value"})
        assert error.details == {"key": "value"}


class TestTaxonomy:
    def test_client_errors_inherit_accounts_error(self):
        """Every client-facing category should be an AccountsError."""
        for error_class in (NotFoundError, ValidationError, ConflictError, AuthenticationError):
            assert isinstance(error_class("x"), AccountsError)

    def test_not_found_error_default_code(self):
        error = NotFoundError("Resource not found")
        assert error.code == "NotFoundError"


class TestExternalServiceError:
    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="supabase")
        assert error.service == "supabase"
        assert error.details["service"] == "supabase"

    def test_external_service_error_preserves_other_details(self):
        error = ExternalServiceError(
            "Connection failed",
            service="supabase",
            details={"status_code": 500}
        )
        assert error.details == {"status_code": 500, "service": "supabase"}


class TestStoreErrors:
    def test_store_error_is_external_service_error(self):
        error = StoreError("down", details={"table": "users"})
        assert isinstance(error, ExternalServiceError)
        assert error.code == "STORE_ERROR"
        assert error.details == {"table": "users", "service": "supabase"}

    def test_duplicate_key_is_a_conflict(self):
        error = DuplicateKeyError("users")
        assert isinstance(error, ConflictError)
        assert error.code == "DUPLICATE_KEY"
        assert error.table == "users"
        assert "users" in error.message
