"""
Unit tests for the registration field rules.

Tests the pure predicates used by RegistrationValidator:
- Blank detection
- Email syntax
- Password complexity policy
- Password confirmation equality
"""

import pytest

from src.domain.rules import is_blank, is_valid_email, password_meets_policy, passwords_match


class TestIsBlank:
    """Tests for is_blank."""

    @pytest.mark.parametrize("value", ["", " ", "\t", "  \n "])
    def test_blank_values(self, value: str) -> None:
        """Empty and whitespace-only strings are blank."""
        assert is_blank(value) is True

    def test_non_blank_value(self) -> None:
        """A value with any visible character is not blank."""
        assert is_blank(" a ") is False


class TestIsValidEmail:
    """Tests for is_valid_email."""

    @pytest.mark.parametrize(
        "email",
        ["user@example.com", "first.last@example.org", "user+tag@sub.example.com"],
    )
    def test_well_formed_addresses(self, email: str) -> None:
        """Well-formed addresses are accepted."""
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        ["", "   ", "not-an-email", "user@", "@example.com", "user@@example.com", "user example@example.com"],
    )
    def test_malformed_addresses(self, email: str) -> None:
        """Malformed addresses are rejected without raising."""
        assert is_valid_email(email) is False


class TestPasswordPolicy:
    """Tests for password_meets_policy."""

    def test_password_with_all_classes_passes(self) -> None:
        """Length 9 with upper, lower, digit and symbol passes."""
        assert password_meets_policy("Abcdefg1@") is True

    def test_password_exactly_8_chars_passes(self) -> None:
        """Minimum length of 8 is inclusive."""
        assert password_meets_policy("A1@bcdef") is True

    def test_missing_uppercase_fails(self) -> None:
        """Password without an uppercase letter fails."""
        assert password_meets_policy("abcdefg1@") is False

    def test_missing_lowercase_fails(self) -> None:
        """Password without a lowercase letter fails."""
        assert password_meets_policy("ABCDEFG1@") is False

    def test_missing_digit_fails(self) -> None:
        """Password without a digit fails."""
        assert password_meets_policy("Abcdefgh@") is False

    def test_missing_symbol_fails(self) -> None:
        """Password without a symbol from the allowed set fails."""
        assert password_meets_policy("Abcdefgh1") is False

    def test_symbol_outside_set_does_not_count(self) -> None:
        """Symbols outside @#$%^&+= do not satisfy the symbol rule."""
        assert password_meets_policy("Abcdefg1!") is False

    @pytest.mark.parametrize("symbol", list("@#$%^&+="))
    def test_every_allowed_symbol_counts(self, symbol: str) -> None:
        """Each symbol of the allowed set satisfies the symbol rule."""
        assert password_meets_policy(f"Abcdefg1{symbol}") is True

    @pytest.mark.parametrize("password", ["A1@b", "A1@bcde", "Ab1@", "aB3$xyz"])
    def test_short_passwords_fail_even_with_all_classes(self, password: str) -> None:
        """Passwords under 8 characters fail regardless of character classes."""
        assert password_meets_policy(password) is False

    def test_whitespace_fails(self) -> None:
        """Passwords containing whitespace fail."""
        assert password_meets_policy("Abc defg1@") is False

    def test_empty_password_fails(self) -> None:
        """Empty password fails."""
        assert password_meets_policy("") is False


class TestPasswordsMatch:
    """Tests for passwords_match."""

    def test_identical_values_match(self) -> None:
        """Identical strings match."""
        assert passwords_match("Abcdefg1@", "Abcdefg1@") is True

    def test_comparison_is_exact(self) -> None:
        """Case and surrounding whitespace are significant."""
        assert passwords_match("Abcdefg1@", "abcdefg1@") is False
        assert passwords_match("Abcdefg1@", "Abcdefg1@ ") is False


class TestEmailEdgeCases:
    """Edge cases aligned with the form's original email check."""

    def test_single_character_tld_rejected(self) -> None:
        """Top-level domain must have at least two characters."""
        assert is_valid_email("a@b.c") is False

    def test_two_character_tld_accepted(self) -> None:
        """Two-character top-level domains are fine."""
        assert is_valid_email("a@b.io") is True

    @pytest.mark.parametrize("email", ["Ünï@example.com", "user@exämple.com"])
    def test_non_ascii_rejected(self, email: str) -> None:
        """Only ASCII addresses are accepted."""
        assert is_valid_email(email) is False

    def test_special_use_test_domain_accepted(self) -> None:
        """Special-use .test domains pass the syntax check."""
        assert is_valid_email("user@foo.test") is True
