"""
Structured error types for swiftdocs.

Every failure the configuration layer can report is a ``SwiftDocsError``
subclass carrying a category, a context mapping, and an optional chained
cause, so the console entry point can log it and choose an exit status
without inspecting message strings.

Manifesto:
    - **Typed Error Hierarchy:** One error type per failure domain
    - **Rich Context:** Errors carry the attribute, option, or file involved
    - **Error Chaining:** The original exception is kept as ``cause``
    - **Fatal vs. user errors:** ``SchemaMismatch`` is a programming defect,
      everything else is a problem with user input

Architecture:
    ::

        ┌───────────────────────────────────────────────────────────┐
        │                     SwiftDocsError                         │
        │            (category, context, cause)                      │
        ├───────────────────────────────────────────────────────────┤
        │                                                            │
        │  ParseError        UsageError          ConfigFileError     │
        │  (PARSE)           (USAGE)             (CONFIG)            │
        │  attribute         option              path                │
        │  raw_value         exit_code=2              │              │
        │                        │             UnsupportedConfigFormat│
        │                 UnknownConfigKey       extension           │
        │                                                            │
        │  SchemaMismatch (INTERNAL, fatal)                          │
        └───────────────────────────────────────────────────────────┘

Examples:
    >>> error = ParseError("author_url", "http://[bad")
    >>> error.attribute
    'author_url'
    >>> error.to_dict()["category"]
    'PARSE'

Tags:
    error-handling, exception-hierarchy, configuration, cli
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for logging and exit-status decisions."""

    PARSE = "PARSE"        # A raw value could not be converted
    USAGE = "USAGE"        # Malformed or unknown command-line input
    CONFIG = "CONFIG"      # Config file missing, malformed, or unsupported
    INTERNAL = "INTERNAL"  # Schema declaration defects


class SwiftDocsError(Exception):
    """Base exception for all swiftdocs errors.

    Subclasses set ``default_category``; the context mapping holds any
    structured metadata worth logging alongside the message.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> SwiftDocsError:
        """Add context to this error (fluent API).

        Usage:
            raise ConfigFileError("Unreadable").with_context(path="swiftdocs.yaml")
        """
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class ParseError(SwiftDocsError):
    """A configuration attribute's parse function rejected its raw value."""

    default_category = ErrorCategory.PARSE
    exit_code = 2

    def __init__(
        self,
        attribute: str,
        raw_value: Any,
        message: str | None = None,
        *,
        cause: Exception | None = None,
    ):
        self.attribute = attribute
        self.raw_value = raw_value
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            message or f"Invalid value for {attribute}: {raw_value!r}{detail}",
            context={"attribute": attribute, "raw_value": repr(raw_value)},
            cause=cause,
        )


class UsageError(SwiftDocsError):
    """The command line could not be parsed (unknown flag, missing value)."""

    default_category = ErrorCategory.USAGE
    exit_code = 2

    def __init__(
        self,
        message: str,
        *,
        option: str | None = None,
        cause: Exception | None = None,
    ):
        self.option = option
        context = {"option": option} if option else None
        super().__init__(message, context=context, cause=cause)


class UnknownConfigKey(UsageError):
    """A config-file mapping named a key that no attribute declares."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown configuration key: {key}", option=key)


class SchemaMismatch(SwiftDocsError):
    """An attribute refers to a field the configuration object lacks.

    Signals a defect in the schema declaration; never caused by user input.
    """

    default_category = ErrorCategory.INTERNAL

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(
            message or f"Configuration schema has no field named {name!r}",
            context={"attribute": name},
        )


class ConfigFileError(SwiftDocsError):
    """A configuration file could not be read or did not hold a mapping."""

    default_category = ErrorCategory.CONFIG

    def __init__(self, path: Any, message: str, *, cause: Exception | None = None):
        self.path = str(path)
        super().__init__(message, context={"path": self.path}, cause=cause)


class UnsupportedConfigFormat(ConfigFileError):
    """A configuration file has an extension other than JSON or YAML."""

    def __init__(self, path: Any):
        self.extension = Path(str(path)).suffix or "(none)"
        super().__init__(
            path,
            f"Config file must be .yaml, .yml or .json, but got {str(path)!r} "
            f"(extension {self.extension})",
        )
        self.context["extension"] = self.extension


def is_user_error(error: Exception) -> bool:
    """Check whether an error was caused by user input rather than a defect."""
    return isinstance(error, SwiftDocsError) and error.category is not ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "SwiftDocsError",
    "ParseError",
    "UsageError",
    "UnknownConfigKey",
    "SchemaMismatch",
    "ConfigFileError",
    "UnsupportedConfigFormat",
    "is_user_error",
]
