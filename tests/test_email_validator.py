"""
Tests for email address validation.

Exercises the exact pattern semantics, including the fail-closed
behavior when matching times out.
"""

from unittest.mock import patch

import pytest

from app.domain.notifications import email_validator
from app.domain.notifications.email_validator import is_valid_email, mask_email


class TestIsValidEmail:
    """Pattern ^[^@\\s]+@[^@\\s]+\\.[^@\\s]+$, case-insensitive."""

    @pytest.mark.parametrize(
        "value",
        [
            "user@example.com",
            "USER@EXAMPLE.COM",
            "first.last+tag@sub.domain.io",
            "a@b.c",
            "a@b..com",
        ],
    )
    def test_accepts(self, value):
        assert is_valid_email(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "   ",
            "not-an-email",
            "a@@b..com",
            "user@localhost",
            "user name@example.com",
            "user@exa mple.com",
            "@example.com",
            "user@.",
            "user@example.",
        ],
    )
    def test_rejects(self, value):
        assert is_valid_email(value) is False

    def test_rejects_none_and_non_strings(self):
        assert is_valid_email(None) is False
        assert is_valid_email(42) is False

    def test_timeout_fails_closed(self):
        with patch.object(email_validator, "_EMAIL_RE") as mock_re:
            mock_re.match.side_effect = TimeoutError("regex timed out")
            assert is_valid_email("user@example.com") is False
            _, kwargs = mock_re.match.call_args
            assert kwargs["timeout"] == email_validator.MATCH_TIMEOUT_SECONDS

    def test_long_adversarial_input_returns_bool(self):
        value = "a@" + "a" * 5000 + "@"
        assert is_valid_email(value) is False


class TestMaskEmail:

    def test_masks_local_part(self):
        assert mask_email("john@example.com") == "j***@example.com"

    def test_no_at_sign(self):
        assert mask_email("garbage") == "***"
