"""
Command-line binding for the configuration schema.

Builds a click command from the attribute registry and runs it against an
argument list, so each matched flag calls its attribute's ``set`` on a
freshly built ``Config``.

Architecture:
    ::

        parse_command_line(args)
            │
            ├──► Config.build()                        defaults + podspec
            │
            ├──► build_command(config, state)
            │       --config FILE        (eager)  ──► parse_config_file + apply_mapping
            │       one option per Attribute      ──► Attribute.set(config, value)
            │       -v/--version         (eager)  ──► print, SystemExit(0)
            │       -h/--help            (eager)  ──► print, SystemExit(0)
            │
            ├──► command.make_context(args)        flags applied in command-line order
            │
            ├──► --podspec given?  ──► read_podspec + apply_podspec (explicit flags win)
            │
            └──► derive_dash_url(config)

Guardrails:
    ❌ DON'T: Let click's defaults overwrite values already on the Config
    ✅ DO: Only call ``set`` for values whose source is the command line

    ❌ DON'T: Swallow click's usage errors
    ✅ DO: Re-raise them as ``UsageError`` naming the offending option

Tags:
    cli, click, configuration, binder, argv
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
from click.core import ParameterSource

from swiftdocs import __version__
from swiftdocs.config.attribute import AttributeRegistry
from swiftdocs.config.files import apply_mapping, parse_config_file
from swiftdocs.config.schema import ATTRIBUTES, Config, derive_dash_url
from swiftdocs.errors import UsageError
from swiftdocs.logging import LogContext, get_logger
from swiftdocs.podspec import PodspecMetadata, apply_podspec, read_podspec

logger = get_logger(__name__)

PROG_NAME = "swiftdocs"
CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@dataclass
class _BindingState:
    """Names of attributes given explicitly while parsing one argument list."""

    explicit: set[str] = field(default_factory=set)
    config_file: Path | None = None


def version_string() -> str:
    return f"{PROG_NAME} version: {__version__}"


def _print_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(version_string())
    ctx.exit(0)


def build_command(
    config: Config,
    registry: AttributeRegistry = ATTRIBUTES,
    state: _BindingState | None = None,
) -> click.Command:
    """Build the click command whose options populate ``config``.

    Options appear in registry order between ``--config`` and the built-in
    ``--version`` / ``--help`` options. Parameter names of the built-in
    options (``config_file``, ``show_version``, ``help``) must not collide
    with attribute names, since click stores values by parameter name.
    """
    state = state if state is not None else _BindingState()

    def _load_config_file(ctx: click.Context, param: click.Parameter, value: str | None) -> None:
        if ctx.resilient_parsing:
            return
        if ctx.get_parameter_source(param.name) is not ParameterSource.COMMANDLINE:
            return
        path = Path(value)
        with LogContext(config_file=str(path)):
            applied = apply_mapping(config, parse_config_file(path), registry)
            logger.info("config_file_applied", fields=applied)
        state.config_file = path
        state.explicit.update(applied)

    params: list[click.Parameter] = [
        click.Option(
            ["--config", "config_file"],
            metavar="FILEPATH",
            is_eager=True,
            expose_value=False,
            callback=_load_config_file,
            help="Load options from a .json, .yaml or .yml file; command-line flags win",
        )
    ]

    for attribute in registry:
        option = attribute.to_click_option(config)
        if option is None:
            continue
        params.append(_tracking(option, attribute.name, state))

    params.append(
        click.Option(
            ["-v", "--version", "show_version"],
            is_flag=True,
            is_eager=True,
            expose_value=False,
            callback=_print_version,
            help="Print version number",
        )
    )

    return click.Command(
        PROG_NAME,
        params=params,
        help="Generate documentation for a Swift or Objective-C module.",
        context_settings=CONTEXT_SETTINGS,
        add_help_option=True,
    )


def _tracking(option: click.Option, name: str, state: _BindingState) -> click.Option:
    """Wrap an option's callback to record that ``name`` came from argv."""
    inner = option.callback

    def _callback(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
        result = inner(ctx, param, value) if inner is not None else value
        if ctx.get_parameter_source(param.name) is ParameterSource.COMMANDLINE:
            state.explicit.add(name)
        return result

    option.callback = _callback
    return option


def help_text(config: Config | None = None) -> str:
    """The ``--help`` output, without exiting."""
    command = build_command(config if config is not None else Config())
    with command.make_context(PROG_NAME, [], resilient_parsing=True) as ctx:
        return command.get_help(ctx)


def parse_command_line(
    args: Sequence[str] | None = None,
    *,
    directory: Path | None = None,
    metadata_reader: Callable[[Path], PodspecMetadata] = read_podspec,
) -> Config:
    """Build a Config and populate it from ``args``.

    Args:
        args: Argument list without the program name; defaults to ``sys.argv[1:]``
        directory: Where to look for a podspec; defaults to the working directory
        metadata_reader: Reads podspec metadata (both discovered and ``--podspec``)

    Returns:
        The fully populated configuration

    Raises:
        UsageError: unknown flag, missing flag value, or unexpected argument
        ParseError: a flag value was rejected by its attribute's parse function
        ConfigFileError: ``--config`` named an unreadable or unsupported file
        SystemExit: ``--help`` or ``--version`` was given (exit code 0)
    """
    if args is None:
        args = sys.argv[1:]

    config = Config.build(directory, metadata_reader=metadata_reader)
    state = _BindingState()
    command = build_command(config, ATTRIBUTES, state)

    try:
        ctx = command.make_context(PROG_NAME, list(args))
    except click.exceptions.Exit as e:
        raise SystemExit(e.exit_code) from None
    except click.UsageError as e:
        raise UsageError(e.format_message(), option=_option_name(e), cause=e) from e
    ctx.close()

    if config.podspec is not None:
        metadata = metadata_reader(config.podspec)
        apply_podspec(config, metadata, skip=state.explicit)

    derive_dash_url(config)
    logger.debug(
        "command_line_parsed",
        explicit=sorted(state.explicit),
        config_file=str(state.config_file) if state.config_file else None,
    )
    return config


def _option_name(error: click.UsageError) -> str | None:
    name = getattr(error, "option_name", None)
    if name:
        return name
    param = getattr(error, "param", None)
    if param is not None and param.opts:
        return param.opts[-1]
    return None


__all__ = [
    "PROG_NAME",
    "build_command",
    "help_text",
    "parse_command_line",
    "version_string",
]
