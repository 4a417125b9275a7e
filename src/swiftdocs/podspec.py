"""
Podspec metadata discovery.

A CocoaPods podspec sitting next to the sources already knows the module
name, version, and author. When one is found in the working directory its
values pre-populate the configuration before any command-line flag is
applied.

Only the handful of fields the configuration needs are read. JSON podspecs
(``*.podspec.json``) are parsed fully; Ruby podspecs (``*.podspec``) are
scanned for simple string assignments such as ``s.name = 'RealmSwift'``.

Examples:
    >>> metadata = read_podspec(Path("RealmSwift.podspec.json"))
    >>> metadata.module_name
    'RealmSwift'
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from swiftdocs.errors import ConfigFileError
from swiftdocs.logging import get_logger

logger = get_logger(__name__)

PODSPEC_PATTERNS = ("*.podspec", "*.podspec.json")

_RUBY_STRING_ATTR = re.compile(
    r"""
    ^\s*\w+\.(?P<key>name|module_name|version)   # s.name / spec.version
    \s*=\s*
    (?P<quote>['"])(?P<value>[^'"]*)(?P=quote)
    """,
    re.VERBOSE | re.MULTILINE,
)
_RUBY_AUTHOR = re.compile(
    r"""^\s*\w+\.authors?\s*=\s*[\[{]?\s*(?P<quote>['"])(?P<value>[^'"]*)(?P=quote)""",
    re.MULTILINE,
)


@dataclass(frozen=True)
class PodspecMetadata:
    """Configuration-relevant fields of a podspec."""

    path: Path
    module_name: str = ""
    version: str = ""
    author_name: str = ""

    def as_fields(self) -> dict[str, str]:
        """Non-empty values keyed by configuration field name."""
        values = {
            "module_name": self.module_name,
            "version": self.version,
            "author_name": self.author_name,
        }
        return {key: value for key, value in values.items() if value}


def find_podspec(directory: Path | None = None) -> Path | None:
    """Return the first podspec in ``directory`` (sorted by name), if any."""
    root = directory or Path.cwd()
    candidates: list[Path] = []
    for pattern in PODSPEC_PATTERNS:
        candidates.extend(p for p in root.glob(pattern) if p.is_file())
    if not candidates:
        return None
    return sorted(candidates)[0]


def read_podspec(path: Path) -> PodspecMetadata:
    """Read module name, version, and first author from a podspec.

    Raises:
        ConfigFileError: the file cannot be read or is malformed JSON
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(path, f"Cannot read podspec {path}: {e}", cause=e) from e

    if path.name.endswith(".json"):
        return _read_json_podspec(path, text)
    return _read_ruby_podspec(path, text)


def _read_json_podspec(path: Path, text: str) -> PodspecMetadata:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigFileError(path, f"Malformed podspec {path}: {e}", cause=e) from e
    if not isinstance(data, dict):
        raise ConfigFileError(path, f"Podspec {path} does not contain an object")

    return PodspecMetadata(
        path=path,
        module_name=str(data.get("module_name") or data.get("name") or ""),
        version=str(data.get("version") or ""),
        author_name=_first_author(data.get("authors", data.get("author"))),
    )


def _read_ruby_podspec(path: Path, text: str) -> PodspecMetadata:
    values: dict[str, str] = {}
    for match in _RUBY_STRING_ATTR.finditer(text):
        values.setdefault(match.group("key"), match.group("value"))
    author = _RUBY_AUTHOR.search(text)

    return PodspecMetadata(
        path=path,
        module_name=values.get("module_name") or values.get("name", ""),
        version=values.get("version", ""),
        author_name=author.group("value") if author else "",
    )


def _first_author(authors: Any) -> str:
    if isinstance(authors, str):
        return authors
    if isinstance(authors, dict):
        return str(next(iter(authors), ""))
    if isinstance(authors, list) and authors:
        return str(authors[0])
    return ""


def apply_podspec(config: Any, metadata: PodspecMetadata, skip: Iterable[str] = ()) -> list[str]:
    """Copy podspec values onto ``config``, leaving fields in ``skip`` alone.

    Returns the names of the fields that were set.
    """
    skipped = set(skip)
    applied = []
    for name, value in metadata.as_fields().items():
        if name in skipped:
            continue
        setattr(config, name, value)
        applied.append(name)
    logger.info("podspec_applied", podspec=str(metadata.path), fields=applied)
    return applied


__all__ = [
    "PODSPEC_PATTERNS",
    "PodspecMetadata",
    "find_podspec",
    "read_podspec",
    "apply_podspec",
]
