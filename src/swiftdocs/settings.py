"""Settings for the swiftdocs process itself.

These are not documentation options (those live in
:mod:`swiftdocs.config`) but knobs for how the tool runs: log level, log
format, and whether the resolved configuration is echoed before handing off
to the generator. All of them can be set via ``SWIFTDOCS_*`` environment
variables or a ``.env`` file.

Examples:
    >>> from swiftdocs.settings import get_settings
    >>> get_settings().log_level
    'WARNING'

Tags:
    settings, configuration, pydantic, environment
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SwiftDocsSettings(BaseSettings):
    """Process-level settings read from the environment.

    Fields
    ──────
    log_level    : structlog log level
    log_json     : force JSON (True) or console (False) logs; None auto-detects
    show_config  : print the resolved configuration table after parsing
    """

    model_config = SettingsConfigDict(
        env_prefix="SWIFTDOCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING")
    log_json: bool | None = Field(default=None)
    show_config: bool = Field(default=False)


_settings_cache: dict[str, SwiftDocsSettings] = {}


def get_settings(*, _force_reload: bool = False) -> SwiftDocsSettings:
    """Load and cache a :class:`SwiftDocsSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]
    settings = SwiftDocsSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = ["SwiftDocsSettings", "get_settings", "clear_settings_cache"]
