"""Unit tests for the shared field rules."""

import pytest

from webeze.core.models.io.validation import (
    ValidationText,
    check_company_name,
    check_email,
    check_hex_color,
    check_password,
    is_company_name,
)


class TestCompanyName:
    @pytest.mark.parametrize("name,expected", [("Acme", "Acme"), ("abc123", "abc123"), ("X" * 100, "X" * 100)])
    def test_valid(self, name, expected):
        assert check_company_name(name) == expected

    @pytest.mark.parametrize("name", ["", "a", "ab"])
    def test_too_short(self, name):
        with pytest.raises(ValueError, match=ValidationText.COMPANY_LENGTH):
            check_company_name(name)

    @pytest.mark.parametrize("name", ["Acme Inc", "acme.io", "acme_co", "Ünïcorn", "  Acme ", "Acme\n"])
    def test_not_alphanumeric(self, name):
        with pytest.raises(ValueError, match=ValidationText.COMPANY_REGEX):
            check_company_name(name)

    def test_too_long(self):
        with pytest.raises(ValueError, match=ValidationText.COMPANY_MAX_LENGTH):
            check_company_name("X" * 101)

    @pytest.mark.parametrize("name,expected", [("acme", True), ("ab", False), ("no way!", False), ("x" * 101, False)])
    def test_is_company_name(self, name, expected):
        assert is_company_name(name) is expected


class TestEmail:
    def test_normalizes_to_lower_case(self):
        assert check_email(" Owner@Example.COM ") == "owner@example.com"

    @pytest.mark.parametrize("email", ["", "owner", "owner@", "@example.com", "owner@@example.com"])
    def test_invalid(self, email):
        with pytest.raises(ValueError, match=ValidationText.EMAIL_REQUIRED):
            check_email(email)


class TestPassword:
    def test_valid(self):
        assert check_password("S3cure!pass", "owner@example.com") == "S3cure!pass"

    def test_too_short(self):
        with pytest.raises(ValueError, match=ValidationText.PASSWORD_LENGTH):
            check_password("short", "owner@example.com")

    @pytest.mark.parametrize("password", ["xxowner@example.comxx", "MyOwnerPass1", "OWNER123"])
    def test_contains_email(self, password):
        with pytest.raises(ValueError, match=ValidationText.PASSWORD_CONTAINS_EMAIL):
            check_password(password, "owner@example.com")

    def test_short_local_part_is_not_checked(self):
        assert check_password("abab1234", "ab@example.com") == "abab1234"

    def test_without_email_only_length_is_checked(self):
        assert check_password("whatever1", None) == "whatever1"


class TestHexColor:
    @pytest.mark.parametrize("color,expected", [("#ABC", "#abc"), ("#6366F1", "#6366f1")])
    def test_valid(self, color, expected):
        assert check_hex_color(color) == expected

    @pytest.mark.parametrize("color", ["6366f1", "#12", "#1234", "#ggg", "blue"])
    def test_invalid(self, color):
        with pytest.raises(ValueError, match=ValidationText.COLOR_INVALID):
            check_hex_color(color)
