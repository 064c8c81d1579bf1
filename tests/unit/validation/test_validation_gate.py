"""Unit tests for the form validation gate."""

from __future__ import annotations

import pytest

from authflow.schemas.enums import ScreenKind
from authflow.validation import validate
from authflow.validation.constants import (
    CONFIRMATION_MISMATCH,
    CONFIRMATION_REQUIRED,
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    SECRET_REQUIRED,
)


pytestmark = pytest.mark.unit


class TestEmailRules:
    """Tests for the email field."""

    def test_empty_email_reports_required_only(self) -> None:
        """Should report required for email and nothing for valid fields."""
        errors = validate({"email": "", "secret": "password123"}, ScreenKind.SIGN_IN)

        assert errors == {"email": EMAIL_REQUIRED}

    def test_missing_email_key_counts_as_empty(self) -> None:
        """Should treat a missing field like an empty one."""
        errors = validate({}, ScreenKind.RESET_REQUEST)

        assert errors == {"email": EMAIL_REQUIRED}

    @pytest.mark.parametrize(
        "email",
        [
            "plainaddress",
            "missing-at.example.com",
            "user@localhost",
            "user@",
            "@example.com",
            "user name@example.com",
            "user@exa mple.com",
            "user@example.",
            "user@.example.com",
        ],
    )
    def test_malformed_email_reports_format_error(self, email: str) -> None:
        """Should reject strings that are not local@domain.tld."""
        errors = validate({"email": email}, ScreenKind.RESET_REQUEST)

        assert errors == {"email": EMAIL_INVALID}

    @pytest.mark.parametrize(
        "email",
        ["test@example.com", "first.last+club@mail.example.co.jp", "a@b.io"],
    )
    def test_well_formed_email_passes(self, email: str) -> None:
        """Should accept standard addresses."""
        assert validate({"email": email}, ScreenKind.RESET_REQUEST) == {}


class TestSecretRules:
    """Tests for the password field."""

    def test_empty_secret_is_required(self) -> None:
        errors = validate({"email": "test@example.com"}, ScreenKind.SIGN_IN)

        assert errors == {"secret": SECRET_REQUIRED}

    @pytest.mark.parametrize("secret", ["a", "12345", "abcde"])
    def test_short_secret_reports_length_error(self, secret: str) -> None:
        """Should require at least 6 characters."""
        errors = validate(
            {"email": "test@example.com", "secret": secret},
            ScreenKind.SIGN_IN,
        )

        assert errors == {"secret": "Password must be at least 6 characters"}

    @pytest.mark.parametrize("secret", ["123456", "password123"])
    def test_long_enough_secret_passes(self, secret: str) -> None:
        errors = validate(
            {"email": "test@example.com", "secret": secret},
            ScreenKind.SIGN_IN,
        )

        assert errors == {}

    def test_custom_minimum_length(self) -> None:
        """Should honour a configured minimum length in the message."""
        errors = validate(
            {"email": "test@example.com", "secret": "1234567"},
            ScreenKind.SIGN_IN,
            min_secret_length=8,
        )

        assert errors == {"secret": "Password must be at least 8 characters"}

    def test_reset_request_ignores_secret(self) -> None:
        """Should only check email on the reset-request screen."""
        errors = validate({"email": "test@example.com", "secret": "x"}, ScreenKind.RESET_REQUEST)

        assert errors == {}


class TestConfirmationRules:
    """Tests for the sign-up confirmation field."""

    def test_mismatch_reported_on_confirmation(self) -> None:
        errors = validate(
            {
                "email": "test@example.com",
                "secret": "password123",
                "secret_confirmation": "password124",
            },
            ScreenKind.SIGN_UP,
        )

        assert errors == {"secret_confirmation": CONFIRMATION_MISMATCH}

    def test_comparison_is_case_sensitive(self) -> None:
        errors = validate(
            {
                "email": "test@example.com",
                "secret": "Password123",
                "secret_confirmation": "password123",
            },
            ScreenKind.SIGN_UP,
        )

        assert errors == {"secret_confirmation": CONFIRMATION_MISMATCH}

    def test_equal_values_pass(self) -> None:
        errors = validate(
            {
                "email": "test@example.com",
                "secret": "password123",
                "secret_confirmation": "password123",
            },
            ScreenKind.SIGN_UP,
        )

        assert errors == {}

    def test_confirmation_required(self) -> None:
        errors = validate(
            {"email": "test@example.com", "secret": "password123"},
            ScreenKind.SIGN_UP,
        )

        assert errors == {"secret_confirmation": CONFIRMATION_REQUIRED}

    def test_sign_in_ignores_confirmation(self) -> None:
        errors = validate(
            {
                "email": "test@example.com",
                "secret": "password123",
                "secret_confirmation": "different",
            },
            ScreenKind.SIGN_IN,
        )

        assert errors == {}


class TestValidateBehaviour:
    """Cross-field behaviour."""

    def test_reports_all_failures_together(self) -> None:
        """Should not stop at the first failing field."""
        errors = validate(
            {"email": "bad", "secret": "123", "secret_confirmation": ""},
            ScreenKind.SIGN_UP,
        )

        assert set(errors) == {"email", "secret", "secret_confirmation"}

    def test_is_idempotent(self) -> None:
        """Should return identical errors for identical input."""
        values = {"email": "bad", "secret": "123", "secret_confirmation": "1234"}

        first = validate(values, ScreenKind.SIGN_UP)
        second = validate(values, ScreenKind.SIGN_UP)

        assert first == second

    def test_clearing_a_field_recomputes_errors(self) -> None:
        """Should not carry errors over once a field is fixed."""
        values = {"email": "bad", "secret": "password123"}
        assert "email" in validate(values, ScreenKind.SIGN_IN)

        values["email"] = "test@example.com"

        assert validate(values, ScreenKind.SIGN_IN) == {}

    def test_does_not_mutate_input(self) -> None:
        values = {"email": "", "secret": ""}

        validate(values, ScreenKind.SIGN_IN)

        assert values == {"email": "", "secret": ""}
