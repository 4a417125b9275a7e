"""Configuration schema, command-line binding, and the current-config access point."""

from swiftdocs.config.access import (
    ConfigAccessPoint,
    ConfigMixin,
    current_config,
    default_access_point,
    set_current_config,
)
from swiftdocs.config.attribute import (
    UNCHANGED,
    Attribute,
    AttributeRegistry,
    CommandLine,
    config_attr,
    config_schema,
)
from swiftdocs.config.binder import build_command, help_text, parse_command_line
from swiftdocs.config.files import apply_mapping, parse_config_file
from swiftdocs.config.schema import ATTRIBUTES, Config, derive_dash_url

__all__ = [
    "ATTRIBUTES",
    "UNCHANGED",
    "Attribute",
    "AttributeRegistry",
    "CommandLine",
    "Config",
    "ConfigAccessPoint",
    "ConfigMixin",
    "apply_mapping",
    "build_command",
    "config_attr",
    "config_schema",
    "current_config",
    "default_access_point",
    "derive_dash_url",
    "help_text",
    "parse_command_line",
    "parse_config_file",
    "set_current_config",
]
