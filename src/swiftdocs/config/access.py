"""
The process-wide current configuration.

Collaborators such as the renderer and the source analyzer should receive
the ``Config`` they work with explicitly. The access point exists for the
single top-level entry point, which builds the configuration once and
installs it here, and for code reached through ``ConfigMixin``.

Examples:
    >>> from swiftdocs.config.access import current_config, set_current_config
    >>> set_current_config(parse_command_line(["--module", "RealmSwift"]))
    >>> current_config().module_name
    'RealmSwift'

    Temporarily replacing it in a test:

    >>> with default_access_point().override(Config(module_name="Fake")):
    ...     assert current_config().module_name == "Fake"

Guardrails:
    - ``current()`` builds a defaulted Config on first use; it never parses
      ``sys.argv``
    - Lazy initialization and replacement happen under one lock
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from swiftdocs.config.schema import Config
from swiftdocs.logging import get_logger

logger = get_logger(__name__)


class ConfigAccessPoint:
    """Holder of "the current" Config, created lazily and replaceable."""

    def __init__(self, factory: Callable[[], Config] = Config.build):
        self._factory = factory
        self._config: Config | None = None
        self._lock = threading.Lock()

    def current(self) -> Config:
        """Return the current Config, building a defaulted one if none is set."""
        with self._lock:
            if self._config is None:
                self._config = self._factory()
                logger.debug("config_initialized_lazily")
            return self._config

    def set_current(self, config: Config | None) -> None:
        """Replace the current Config; None clears it so the next read rebuilds."""
        with self._lock:
            self._config = config

    def reset(self) -> None:
        self.set_current(None)

    @property
    def is_set(self) -> bool:
        with self._lock:
            return self._config is not None

    @contextmanager
    def override(self, config: Config) -> Iterator[Config]:
        """Install ``config`` for the duration of the block, then restore."""
        with self._lock:
            previous = self._config
            self._config = config
        try:
            yield config
        finally:
            with self._lock:
                self._config = previous


_default = ConfigAccessPoint()


def default_access_point() -> ConfigAccessPoint:
    return _default


def current_config() -> Config:
    return _default.current()


def set_current_config(config: Config | None) -> None:
    _default.set_current(config)


class ConfigMixin:
    """Gives a class a ``config`` property.

    An instance may carry its own ``_config``; otherwise the process-wide
    current configuration is used.
    """

    _config: Config | None = None

    @property
    def config(self) -> Config:
        if self._config is not None:
            return self._config
        return current_config()

    def use_config(self, config: Config | None) -> Any:
        self._config = config
        return self


__all__ = [
    "ConfigAccessPoint",
    "ConfigMixin",
    "current_config",
    "default_access_point",
    "set_current_config",
]
