"""Parse functions used by configuration attributes.

Each function converts one raw command-line (or config-file) value into the
semantic value stored on the configuration object. They are pure: none of
them touches the file system beyond path arithmetic.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any
from urllib.parse import urljoin, urlsplit

from swiftdocs.access_control import AccessControlLevel
from swiftdocs.config.attribute import UNCHANGED


def parse_path(value: str | os.PathLike[str]) -> Path:
    return Path(value)


def parse_string(value: Any) -> str | None:
    """Store config-file scalars (``version: 1.0``) as text; None stays None.

    YAML has already read the scalar, so ``1.10`` arrives as ``1.1``; quote
    such values in the file.
    """
    if value is None:
        return None
    return str(value)


_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")


def parse_bool(value: bool | str) -> bool:
    """Accept a bool, or a true/false word as found in config files."""
    if isinstance(value, bool):
        return value
    token = str(value).strip().lower()
    if token in _TRUE:
        return True
    if token in _FALSE:
        return False
    raise ValueError(f"Expected a boolean, got {value!r}")


def parse_string_list(value: str | Iterable[Any]) -> list[str]:
    """Split ``a,b`` into ``["a", "b"]``; lists pass through as strings."""
    if isinstance(value, str):
        return [item for item in value.split(",") if item]
    return [str(item) for item in value]


def parse_absolute_paths(value: str | Iterable[Any]) -> list[Path]:
    """Expand each entry to an absolute, normalized path (``~`` expanded)."""
    return [
        Path(os.path.abspath(os.path.expanduser(entry)))
        for entry in parse_string_list(value)
    ]


def parse_url(value: str) -> str:
    """Validate URL syntax and return the URL.

    An empty string is accepted and means "no URL".

    Raises:
        ValueError: the value contains whitespace, is not a valid URL, or
            names an http(s) scheme without a host
    """
    value = str(value).strip()
    if not value:
        return ""
    if any(ch.isspace() for ch in value):
        raise ValueError(f"URL must not contain whitespace: {value!r}")
    parts = urlsplit(value)
    _ = parts.port  # malformed or out-of-range port raises ValueError
    if parts.scheme in ("http", "https") and not parts.netloc:
        raise ValueError(f"URL has no host: {value!r}")
    return parts.geturl()


def parse_access_level(value: str) -> Any:
    """Map ``private``/``internal``/``public`` to a level.

    Any other token returns ``UNCHANGED`` so the field keeps its current
    value instead of failing.
    """
    level = AccessControlLevel.from_token(str(value).strip())
    if level is None:
        return UNCHANGED
    return level


def join_url(base: str, path: str) -> str:
    """Join ``path`` onto ``base`` the way a browser resolves a relative link."""
    return urljoin(base, path)


__all__ = [
    "parse_path",
    "parse_string",
    "parse_bool",
    "parse_string_list",
    "parse_absolute_paths",
    "parse_url",
    "parse_access_level",
    "join_url",
]
