"""
swiftdocs - documentation generator configuration.

Declares every documentation option once, binds the options to the command
line, and holds the resulting configuration for the rest of the run.

Example:
    >>> from swiftdocs import parse_command_line, set_current_config
    >>> config = parse_command_line(["--module", "RealmSwift", "--min-acl", "internal"])
    >>> set_current_config(config)
"""

__version__ = "0.1.0"

from swiftdocs.access_control import AccessControlLevel  # noqa: E402
from swiftdocs.config import (  # noqa: E402
    Config,
    ConfigMixin,
    current_config,
    parse_command_line,
    set_current_config,
)

__all__ = [
    "AccessControlLevel",
    "Config",
    "ConfigMixin",
    "current_config",
    "parse_command_line",
    "set_current_config",
    "__version__",
]
