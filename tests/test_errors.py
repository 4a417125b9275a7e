"""Tests for the swiftdocs error hierarchy."""

import pytest

from swiftdocs.errors import (
    ConfigFileError,
    ErrorCategory,
    ParseError,
    SchemaMismatch,
    SwiftDocsError,
    UnknownConfigKey,
    UnsupportedConfigFormat,
    UsageError,
    is_user_error,
)


class TestSwiftDocsError:
    def test_defaults(self):
        error = SwiftDocsError("boom")
        assert error.message == "boom"
        assert error.category is ErrorCategory.INTERNAL
        assert error.context == {}
        assert error.cause is None
        assert error.exit_code == 1

    def test_cause_is_chained(self):
        cause = ValueError("inner")
        error = SwiftDocsError("outer", cause=cause)
        assert error.__cause__ is cause
        assert error.to_dict()["cause"] == "inner"

    def test_with_context(self):
        error = ConfigFileError("a.yaml", "Unreadable").with_context(line=3)
        assert error.context == {"path": "a.yaml", "line": 3}

    def test_to_dict(self):
        data = UsageError("bad flag", option="--nope").to_dict()
        assert data == {
            "error_type": "UsageError",
            "message": "bad flag",
            "category": "USAGE",
            "context": {"option": "--nope"},
        }

    def test_repr(self):
        assert repr(SchemaMismatch("x")) == (
            "SchemaMismatch(\"Configuration schema has no field named 'x'\", category=INTERNAL)"
        )


class TestSubclasses:
    def test_parse_error(self):
        error = ParseError("author_url", "http://[bad", cause=ValueError("Invalid IPv6 URL"))
        assert error.category is ErrorCategory.PARSE
        assert error.exit_code == 2
        assert "author_url" in error.message
        assert "Invalid IPv6 URL" in error.message
        assert error.context["attribute"] == "author_url"

    def test_unknown_config_key_is_usage_error(self):
        error = UnknownConfigKey("outputs")
        assert isinstance(error, UsageError)
        assert error.exit_code == 2
        assert error.option == "outputs"

    def test_unsupported_format_is_config_error(self):
        error = UnsupportedConfigFormat("settings.toml")
        assert isinstance(error, ConfigFileError)
        assert error.category is ErrorCategory.CONFIG
        assert error.extension == ".toml"
        assert error.exit_code == 1

    @pytest.mark.parametrize(
        "error,expected",
        [
            (ParseError("clean", "maybe"), True),
            (UsageError("bad"), True),
            (ConfigFileError("x.json", "bad"), True),
            (SchemaMismatch("missing"), False),
            (ValueError("plain"), False),
        ],
    )
    def test_is_user_error(self, error, expected):
        assert is_user_error(error) is expected
