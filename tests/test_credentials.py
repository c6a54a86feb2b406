"""Tests for signup credential rules."""

from __future__ import annotations

import pytest

from app.exceptions import CredentialValidationError, ValidationError
from app.services.credentials import (
    MIN_PASSWORD_LENGTH,
    validate_credentials,
    validate_email,
    validate_password,
    validate_workspace_name,
)
from app.services.passwords import MAX_PASSWORD_BYTES


class TestValidateEmail:
    @pytest.mark.parametrize(
        "email",
        [
            "user@example.com",
            "USER@Example.com",
            "first.last+tag@sub.example.co.uk",
            "a@b.io",
        ],
    )
    def test_accepts_standard_shape(self, email: str) -> None:
        validate_email(email)

    @pytest.mark.parametrize(
        "email",
        [
            "not-an-email",
            "@example.com",
            "user@example",
            "user@example.c",
            "user@@example.com",
            "user example@example.com",
            "user@example.com\n",
            "user@example.com extra",
            "",
        ],
    )
    def test_rejects_malformed(self, email: str) -> None:
        with pytest.raises(CredentialValidationError) as exc_info:
            validate_email(email)
        assert exc_info.value.field == "email"
        assert exc_info.value.code == "VALIDATION_ERROR"


class TestValidatePassword:
    def test_minimum_length_accepted(self) -> None:
        validate_password("a" * MIN_PASSWORD_LENGTH)

    def test_one_short_rejected(self) -> None:
        with pytest.raises(CredentialValidationError) as exc_info:
            validate_password("a" * (MIN_PASSWORD_LENGTH - 1))
        assert exc_info.value.field == "password"
        assert "at least 8 characters" in exc_info.value.message

    def test_no_complexity_rules(self) -> None:
        validate_password("aaaaaaaa")

    def test_72_bytes_accepted(self) -> None:
        validate_password("a" * MAX_PASSWORD_BYTES)

    def test_over_72_bytes_rejected(self) -> None:
        with pytest.raises(CredentialValidationError) as exc_info:
            validate_password("p" * 80)
        assert exc_info.value.field == "password"
        assert exc_info.value.code == "VALIDATION_ERROR"
        assert "at most 72 bytes" in exc_info.value.message

    def test_byte_limit_counts_utf8_bytes(self) -> None:
        # 25 three-byte characters is 75 bytes
        with pytest.raises(CredentialValidationError):
            validate_password("€" * 25)


class TestValidateWorkspaceName:
    def test_empty_rejected(self) -> None:
        with pytest.raises(CredentialValidationError) as exc_info:
            validate_workspace_name("")
        assert exc_info.value.field == "workspaceName"

    def test_whitespace_only_accepted(self) -> None:
        """Names are not trimmed before the emptiness check."""
        validate_workspace_name("   ")


class TestValidateCredentials:
    def test_all_valid(self) -> None:
        validate_credentials("user@example.com", "password123", "Acme")

    def test_email_checked_first(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_credentials("bad", "short", "")
        assert exc_info.value.details == {"field": "email"}

    def test_password_checked_before_workspace(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_credentials("user@example.com", "short", "")
        assert exc_info.value.details == {"field": "password"}
