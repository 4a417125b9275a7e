"""Tests for attribute parse functions."""

import pytest

from swiftdocs.config.parsers import parse_bool, parse_string, parse_url


class TestParseUrl:
    def test_valid_port(self):
        assert parse_url("http://localhost:8080/docs/") == "http://localhost:8080/docs/"

    @pytest.mark.parametrize("value", ["http://x.io:notaport/", "http://x.io:99999/"])
    def test_bad_port(self, value):
        with pytest.raises(ValueError):
            parse_url(value)

    def test_empty_means_no_url(self):
        assert parse_url("") == ""

    def test_missing_host(self):
        with pytest.raises(ValueError, match="no host"):
            parse_url("https://")


class TestParseString:
    @pytest.mark.parametrize("value,expected", [("1.0", "1.0"), (1.0, "1.0"), (3, "3")])
    def test_text(self, value, expected):
        assert parse_string(value) == expected

    def test_none(self):
        assert parse_string(None) is None


class TestParseBool:
    @pytest.mark.parametrize("value", [True, "true", "Yes", "1", "on"])
    def test_true(self, value):
        assert parse_bool(value) is True

    def test_rejects_other_words(self):
        with pytest.raises(ValueError):
            parse_bool("sometimes")
