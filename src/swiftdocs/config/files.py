"""Configuration file loading.

A config file is an alternative source of option values: a JSON or YAML
mapping whose keys are attribute names (``module_name`` or ``module-name``)
and whose values go through the same parse functions as command-line
values.

Examples:
    >>> data = parse_config_file(Path(".swiftdocs.yaml"))
    >>> apply_mapping(config, data)
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from swiftdocs.config.attribute import AttributeRegistry
from swiftdocs.errors import ConfigFileError, UnknownConfigKey, UnsupportedConfigFormat
from swiftdocs.logging import get_logger

logger = get_logger(__name__)

JSON_EXTENSIONS = (".json",)
YAML_EXTENSIONS = (".yaml", ".yml")


def parse_config_file(path: str | Path) -> dict[str, Any]:
    """Load a JSON or YAML config file into a plain mapping.

    Args:
        path: Path to a ``.json``, ``.yaml`` or ``.yml`` file

    Returns:
        The top-level mapping (empty for an empty YAML file)

    Raises:
        UnsupportedConfigFormat: the extension is not JSON or YAML
        ConfigFileError: the file is unreadable, malformed, or not a mapping
    """
    path = Path(path)
    extension = path.suffix.lower()
    if extension not in JSON_EXTENSIONS + YAML_EXTENSIONS:
        raise UnsupportedConfigFormat(path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(path, f"Cannot read config file {path}: {e}", cause=e) from e

    try:
        if extension in JSON_EXTENSIONS:
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigFileError(path, f"Malformed config file {path}: {e}", cause=e) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigFileError(
            path, f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    logger.debug("config_file_loaded", path=str(path), keys=sorted(data))
    return data


def apply_mapping(config: Any, mapping: Mapping[str, Any], registry: AttributeRegistry) -> list[str]:
    """Set each mapped value on ``config`` through its attribute's parse function.

    Keys are matched against attribute names with ``-`` treated as ``_``.
    Values are applied in mapping order.

    Returns:
        Names of the attributes that were set

    Raises:
        UnknownConfigKey: a key matches no attribute
        ParseError: a value was rejected by its parse function
    """
    applied = []
    for key, value in mapping.items():
        name = str(key).replace("-", "_")
        if name not in registry:
            raise UnknownConfigKey(str(key))
        registry.get(name).set(config, value)
        applied.append(name)
    return applied


__all__ = ["parse_config_file", "apply_mapping", "JSON_EXTENSIONS", "YAML_EXTENSIONS"]
