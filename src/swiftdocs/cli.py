"""
Console entry point for swiftdocs.

Parses the command line into a ``Config``, installs it as the current
configuration, and reports problems the way a command-line tool should:
one readable line on stderr and a non-zero exit status.

Usage:
    swiftdocs --module RealmSwift --author Realm --root-url https://realm.io/docs/
    swiftdocs --config .swiftdocs.yaml --min-acl internal
    swiftdocs --help
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from swiftdocs.config import Config, parse_command_line, set_current_config
from swiftdocs.errors import SwiftDocsError, is_user_error
from swiftdocs.logging import configure_logging, get_logger
from swiftdocs.settings import get_settings

logger = get_logger(__name__)

console = Console()
error_console = Console(stderr=True)


def render_config(config: Config) -> Table:
    """A two-column table of every configuration field."""
    table = Table(title="swiftdocs configuration")
    table.add_column("Option", style="cyan")
    table.add_column("Value")
    for name, value in config.to_dict().items():
        table.add_row(name, "" if value is None else str(value))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the configuration phase and return the process exit status.

    ``--help`` and ``--version`` exit the process directly with status 0.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)

    try:
        config = parse_command_line(argv)
    except SwiftDocsError as e:
        if not is_user_error(e):
            raise
        logger.error("configuration_failed", **e.to_dict())
        error_console.print(f"[bold red]error:[/bold red] {escape(e.message)}", highlight=False)
        if e.exit_code == 2:
            error_console.print("Try 'swiftdocs --help' for help.", highlight=False)
        return e.exit_code

    set_current_config(config)
    logger.info(
        "configuration_ready",
        module=config.module_name,
        output=str(config.output),
        min_acl=config.min_acl.value,
    )

    if settings.show_config:
        console.print(render_config(config))
    return 0


def run() -> None:
    """setuptools/pyproject console-script entry."""
    sys.exit(main())


if __name__ == "__main__":
    run()
