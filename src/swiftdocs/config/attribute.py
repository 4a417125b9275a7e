"""
Attribute descriptors and the registry that holds them.

An ``Attribute`` describes one configuration field: its name, help text,
optional command-line flag, and the parse function that turns a raw value
into the field's semantic value. The ``AttributeRegistry`` keeps attributes
in declaration order; it is filled once, when the configuration schema is
declared, and shared by every configuration object.

Manifesto:
    One option, one declaration. A field declared with ``config_attr`` on a
    ``config_schema`` class becomes a typed dataclass field, a registry
    entry, a command-line flag, and a help line, without repeating its name
    anywhere else.

Architecture:
    ::

        @config_schema(registry)
        class Config:
            output: Path = config_attr(...)      ──►  dataclass field
                                                  ──►  Attribute("output")
                                                         │
                                                         ▼
                                                AttributeRegistry (ordered)
                                                         │
                          ┌──────────────────────────────┼──────────────┐
                          ▼                              ▼              ▼
                  to_click_option(config)         get / set       help text

Guardrails:
    ❌ DON'T: Store a raw command-line string in a field with a parse function
    ✅ DO: Go through ``Attribute.set`` so the value is parsed first

    ❌ DON'T: Remove attributes after startup
    ✅ DO: Treat the registry as append-only for the process lifetime

Tags:
    configuration, schema, descriptor, registry, cli, click
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator, Sequence
from dataclasses import MISSING, dataclass, field, fields
from typing import Any

import click
from click.core import ParameterSource

from swiftdocs.errors import ParseError, SchemaMismatch
from swiftdocs.logging import get_logger

logger = get_logger(__name__)

_METADATA_KEY = "swiftdocs.attribute"


class _Unchanged:
    """Sentinel returned by a parse function to keep the field's prior value."""

    _instance: _Unchanged | None = None

    def __new__(cls) -> _Unchanged:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNCHANGED"


UNCHANGED: Any = _Unchanged()


def identity(value: Any) -> Any:
    return value


class CommaSeparatedList(click.ParamType):
    """Click type splitting ``a,b,c`` into ``["a", "b", "c"]``.

    Empty entries are dropped, so ``a,,b`` and ``a,b,`` both yield two items.
    """

    name = "list"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> list[str]:
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return [item for item in str(value).split(",") if item]


COMMA_LIST = CommaSeparatedList()


@dataclass(frozen=True)
class CommandLine:
    """Command-line binding of an attribute.

    Attributes:
        long: Long flag, e.g. ``--output``
        short: Optional short flag, e.g. ``-o``
        metavar: Placeholder shown in help, e.g. ``FOLDER``
        value_type: ``list`` for comma-separated values, None for one string
        flag: True for an on/off toggle rendered as ``--name/--no-name``
    """

    long: str
    short: str | None = None
    metavar: str | None = None
    value_type: type | None = None
    flag: bool = False

    def declarations(self, name: str) -> list[str]:
        decls = [self.short] if self.short else []
        if self.flag:
            decls.append(f"{self.long}/--no-{self.long[2:]}")
        else:
            decls.append(self.long)
        decls.append(name)
        return decls

    @property
    def click_type(self) -> click.ParamType:
        if self.value_type is list:
            return COMMA_LIST
        return click.STRING


@dataclass(frozen=True)
class Attribute:
    """Immutable description of one configuration field.

    Attributes:
        name: Field name, unique within the registry
        description: Help text; None, a line, or several lines
        command_line: Flag binding, or None for declaration-only fields
        parse: Converts a raw value into the semantic value
    """

    name: str
    description: str | Sequence[str] | None = None
    command_line: CommandLine | None = None
    parse: Callable[[Any], Any] = identity

    @property
    def help_text(self) -> str:
        if self.description is None:
            return ""
        if isinstance(self.description, str):
            return self.description
        return " ".join(line.strip() for line in self.description)

    def get(self, config: Any) -> Any:
        """Return the value of this attribute's field on ``config``."""
        self._require_field(config)
        return getattr(config, self.name)

    def set(self, config: Any, raw_value: Any) -> None:
        """Parse ``raw_value`` and store the result on ``config``.

        Raises:
            SchemaMismatch: ``config`` has no field for this attribute
            ParseError: the parse function rejected ``raw_value``
        """
        self._require_field(config)
        try:
            value = self.parse(raw_value)
        except Exception as e:
            raise ParseError(self.name, raw_value, cause=e) from e

        if value is UNCHANGED:
            logger.warning(
                "attribute_value_ignored",
                attribute=self.name,
                raw_value=raw_value,
                kept=getattr(config, self.name),
            )
            return

        setattr(config, self.name, value)
        logger.debug("attribute_set", attribute=self.name, value=str(value))

    def to_click_option(self, config: Any) -> click.Option | None:
        """Bind this attribute to a click option that sets it on ``config``.

        The callback only fires a ``set`` for values that came from the
        command line, so defaults already on ``config`` are never replaced by
        click's own defaults. Returns None for declaration-only attributes.
        """
        if self.command_line is None:
            return None
        command_line = self.command_line

        def _callback(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
            if ctx.resilient_parsing:
                return value
            if ctx.get_parameter_source(param.name) is ParameterSource.COMMANDLINE:
                self.set(config, value)
            return value

        if command_line.flag:
            return click.Option(
                command_line.declarations(self.name),
                help=self.help_text or None,
                expose_value=False,
                callback=_callback,
            )
        return click.Option(
            command_line.declarations(self.name),
            type=command_line.click_type,
            metavar=command_line.metavar,
            help=self.help_text or None,
            expose_value=False,
            callback=_callback,
        )

    def _require_field(self, config: Any) -> None:
        if not hasattr(config, self.name):
            raise SchemaMismatch(self.name)


class AttributeRegistry:
    """Thread-safe, ordered, append-only collection of attributes."""

    def __init__(self) -> None:
        self._attributes: dict[str, Attribute] = {}
        self._lock = threading.RLock()

    def register(self, attribute: Attribute) -> Attribute:
        """Append an attribute.

        Raises:
            SchemaMismatch: an attribute with the same name already exists
        """
        with self._lock:
            if attribute.name in self._attributes:
                raise SchemaMismatch(
                    attribute.name,
                    f"Attribute already registered: {attribute.name}",
                )
            self._attributes[attribute.name] = attribute
            return attribute

    def all(self) -> list[Attribute]:
        """All attributes in declaration order."""
        with self._lock:
            return list(self._attributes.values())

    def get(self, name: str) -> Attribute:
        with self._lock:
            try:
                return self._attributes[name]
            except KeyError:
                raise SchemaMismatch(name) from None

    def names(self) -> list[str]:
        with self._lock:
            return list(self._attributes)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._attributes

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.all())

    def __len__(self) -> int:
        with self._lock:
            return len(self._attributes)


@dataclass(frozen=True)
class _AttributeOptions:
    description: str | Sequence[str] | None = None
    command_line: CommandLine | None = None
    parse: Callable[[Any], Any] = identity


def config_attr(
    *,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    description: str | Sequence[str] | None = None,
    command_line: CommandLine | None = None,
    parse: Callable[[Any], Any] = identity,
) -> Any:
    """Declare a configuration field on a ``config_schema`` class."""
    return field(
        default=default,
        default_factory=default_factory,
        metadata={_METADATA_KEY: _AttributeOptions(description, command_line, parse)},
    )


def config_schema(registry: AttributeRegistry) -> Callable[[type], type]:
    """Class decorator: make a dataclass and register one Attribute per field.

    Attributes are registered in field declaration order and named after
    their fields. Fields declared without ``config_attr`` become
    declaration-only attributes with an identity parse.
    """

    def decorate(cls: type) -> type:
        cls = dataclass(cls)
        for f in fields(cls):
            options = f.metadata.get(_METADATA_KEY, _AttributeOptions())
            registry.register(
                Attribute(
                    f.name,
                    description=options.description,
                    command_line=options.command_line,
                    parse=options.parse,
                )
            )
        return cls

    return decorate


__all__ = [
    "UNCHANGED",
    "identity",
    "CommaSeparatedList",
    "COMMA_LIST",
    "CommandLine",
    "Attribute",
    "AttributeRegistry",
    "config_attr",
    "config_schema",
]
