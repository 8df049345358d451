"""
Tests for host parsing and subdomain sanitization/validation.
"""

import pytest

from app.core.subdomain import (
    extract_subdomain,
    is_main_domain,
    sanitize_subdomain,
    is_valid_subdomain,
)


class TestExtractSubdomain:

    @pytest.mark.parametrize("host", [
        "example.com",
        "example.com:8080",
        "localhost",
        "localhost:3000",
        "127.0.0.1",
        "127.0.0.1:8000",
        "testserver",
        "",
    ])
    def test_hosts_without_subdomain(self, host):
        assert extract_subdomain(host) is None
        assert is_main_domain(host) is True

    @pytest.mark.parametrize("host,expected", [
        ("acme.fluke.xyz", "acme"),
        ("acme.fluke.xyz:443", "acme"),
        ("shop.acme.co.uk", "shop"),
        ("www.example.com", "www"),
    ])
    def test_first_label_of_three_or_more(self, host, expected):
        assert extract_subdomain(host) == expected
        assert is_main_domain(host) is False

    def test_local_development_subdomain(self):
        assert extract_subdomain("acme.localhost:3000") == "acme"
        assert extract_subdomain("acme.localhost") == "acme"

    def test_returned_verbatim(self):
        # No normalization: the resolver matches exactly what the browser sent
        assert extract_subdomain("Acme.fluke.xyz") == "Acme"

    @pytest.mark.parametrize("host", [".example.com", "..", ":3000", ".localhost"])
    def test_malformed_hosts_yield_none(self, host):
        assert extract_subdomain(host) is None


class TestSanitizeSubdomain:

    @pytest.mark.parametrize("raw,expected", [
        ("ACME CO", "acme-co"),
        ("ACME!! Co", "acme-co"),
        ("My_Shop", "myshop"),
        ("--acme--", "acme"),
        ("acme.shop", "acmeshop"),
        ("  padded  ", "padded"),
        ("!!!", ""),
    ])
    def test_sanitize(self, raw, expected):
        assert sanitize_subdomain(raw) == expected

    @pytest.mark.parametrize("raw", [
        "ACME CO", "ACME!! Co", "-a-b-", "Ünïcödé shop", "a  -  b", "", "x" * 80, "\tTab\nNew",
    ])
    def test_idempotent(self, raw):
        once = sanitize_subdomain(raw)
        assert sanitize_subdomain(once) == once

    def test_sanitized_example_is_valid(self):
        assert is_valid_subdomain(sanitize_subdomain("ACME!! Co"))


class TestIsValidSubdomain:

    @pytest.mark.parametrize("value", ["abc", "acme-co", "a1b", "123", "a" * 63])
    def test_valid(self, value):
        assert is_valid_subdomain(value) is True

    @pytest.mark.parametrize("value", [
        "a",
        "ab",            # below length floor
        "-abc",          # leading hyphen
        "abc-",          # trailing hyphen
        "ABC",           # upper case
        "ab_c",
        "a" * 64,
        "",
        "abc\n",
    ])
    def test_invalid(self, value):
        assert is_valid_subdomain(value) is False
