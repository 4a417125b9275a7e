"""
The swiftdocs configuration schema.

Every documentation option is declared exactly once, below, as a field of
``Config``. The declaration carries the default, the help text, the
command-line flag, and the parse function; ``config_schema`` turns it into
a registry entry that the CLI binder, the config-file loader, and the help
text all read from.

Architecture:
    ::

        Config.build(directory)
            │
            ├──► Config()                  literal defaults
            │
            ├──► find_podspec(directory)   *.podspec / *.podspec.json
            │         │
            │         ▼
            │    read_podspec ──► apply_podspec (module_name, version, author)
            │
            ▼
        fully-defaulted Config  ──► parse_command_line() ──► access point

Tags:
    configuration, schema, defaults, dataclass
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

from swiftdocs.access_control import AccessControlLevel
from swiftdocs.config.attribute import (
    Attribute,
    AttributeRegistry,
    CommandLine,
    config_attr,
    config_schema,
)
from swiftdocs.config.parsers import (
    join_url,
    parse_absolute_paths,
    parse_access_level,
    parse_bool,
    parse_path,
    parse_string,
    parse_string_list,
    parse_url,
)
from swiftdocs.errors import ConfigFileError
from swiftdocs.logging import get_logger
from swiftdocs.podspec import PodspecMetadata, apply_podspec, find_podspec, read_podspec

logger = get_logger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent

ATTRIBUTES = AttributeRegistry()


@config_schema(ATTRIBUTES)
class Config:
    """Run configuration for one documentation build."""

    # ── Build ────────────────────────────────────────────────────

    output: Path = config_attr(
        default=Path("docs"),
        description="Folder to output the HTML docs to",
        command_line=CommandLine("--output", "-o", metavar="FOLDER"),
        parse=parse_path,
    )
    clean: bool = config_attr(
        default=False,
        description=[
            "Delete contents of output directory before running.",
            "WARNING: If --output is set to ~/Desktop, this will delete the ~/Desktop directory.",
        ],
        command_line=CommandLine("--clean", "-c", flag=True),
        parse=parse_bool,
    )
    xcodebuild_arguments: list[str] = config_attr(
        default_factory=list,
        description="Arguments to forward to xcodebuild",
        command_line=CommandLine(
            "--xcodebuild-arguments", "-x", metavar="arg1,arg2,…argN", value_type=list
        ),
        parse=parse_string_list,
    )
    sourcekitten_sourcefile: Path | None = config_attr(
        default=None,
        description="File generated from sourcekitten output to parse",
        command_line=CommandLine("--sourcekitten-sourcefile", "-s", metavar="FILEPATH"),
        parse=parse_path,
    )
    source_directory: Path = config_attr(
        default_factory=Path.cwd,
        description="The directory that contains the source to be documented",
        command_line=CommandLine("--source-directory", metavar="DIRPATH"),
        parse=parse_path,
    )
    excluded_files: list[Path] = config_attr(
        default_factory=list,
        description="Files to be excluded from documentation",
        command_line=CommandLine(
            "--exclude", "-e", metavar="file1,file2,…fileN", value_type=list
        ),
        parse=parse_absolute_paths,
    )
    swift_version: str = config_attr(
        default="2.0",
        description="Swift language version of the documented sources",
        command_line=CommandLine("--swift-version", metavar="VERSION"),
        parse=parse_string,
    )

    # ── Metadata ─────────────────────────────────────────────────

    author_name: str = config_attr(
        default="",
        description="Name of author to attribute in docs (e.g. Realm)",
        command_line=CommandLine("--author", "-a", metavar="AUTHOR_NAME"),
        parse=parse_string,
    )
    author_url: str = config_attr(
        default="",
        description="Author URL of this project (e.g. http://realm.io)",
        command_line=CommandLine("--author_url", "-u", metavar="URL"),
        parse=parse_url,
    )
    module_name: str = config_attr(
        default="",
        description="Name of module being documented. (e.g. RealmSwift)",
        command_line=CommandLine("--module", "-m", metavar="MODULE_NAME"),
        parse=parse_string,
    )
    version: str = config_attr(
        default="1.0",
        description="module version. will be used when generating docset",
        command_line=CommandLine("--module-version", metavar="VERSION"),
        parse=parse_string,
    )
    copyright: str | None = config_attr(
        default=None,
        description="copyright markdown rendered at the bottom of the docs pages",
        command_line=CommandLine("--copyright", metavar="COPYRIGHT_MARKDOWN"),
        parse=parse_string,
    )
    readme_path: Path | None = config_attr(
        default=None,
        description="The path to a markdown README file",
        command_line=CommandLine("--readme", metavar="FILEPATH"),
        parse=parse_path,
    )
    podspec: Path | None = config_attr(
        default=None,
        description="A CocoaPods Podspec that describes the module to document",
        command_line=CommandLine("--podspec", metavar="FILEPATH"),
        parse=parse_path,
    )
    docset_platform: str = config_attr(default="swiftdocs", parse=parse_string)
    docset_icon: Path | None = config_attr(
        default=None,
        description="Icon for the generated docset",
        command_line=CommandLine("--docset-icon", metavar="FILEPATH"),
        parse=parse_path,
    )
    docset_path: str | None = config_attr(
        default=None,
        description="The relative path for the generated docset",
        command_line=CommandLine("--docset-path", metavar="DIRPATH"),
        parse=parse_string,
    )

    # ── URLs ─────────────────────────────────────────────────────

    root_url: str | None = config_attr(
        default=None,
        description="Absolute URL root where these docs will be stored",
        command_line=CommandLine("--root-url", "-r", metavar="URL"),
        parse=parse_url,
    )
    dash_url: str | None = config_attr(
        default=None,
        description="Location of the dash XML feed (e.g. http://realm.io/docsets/realm.xml)",
        command_line=CommandLine("--dash_url", "-d", metavar="URL"),
        parse=parse_url,
    )
    github_url: str | None = config_attr(
        default=None,
        description="GitHub URL of this project (e.g. https://github.com/realm/realm-cocoa)",
        command_line=CommandLine("--github_url", "-g", metavar="URL"),
        parse=parse_url,
    )
    github_file_prefix: str | None = config_attr(
        default=None,
        description=(
            "GitHub URL file prefix of this project "
            "(e.g. https://github.com/realm/realm-cocoa/tree/v0.87.1)"
        ),
        command_line=CommandLine("--github-file-prefix", metavar="PREFIX"),
        parse=parse_string,
    )

    # ── Doc generation options ───────────────────────────────────

    min_acl: AccessControlLevel = config_attr(
        default=AccessControlLevel.PUBLIC,
        description="minimum access control level to document (default is public)",
        command_line=CommandLine("--min-acl", metavar="[private | internal | public]"),
        parse=parse_access_level,
    )
    skip_undocumented: bool = config_attr(
        default=False,
        description="Don't document declarations that have no documentation comments.",
        command_line=CommandLine("--skip-undocumented", flag=True),
        parse=parse_bool,
    )
    hide_documentation_coverage: bool = config_attr(
        default=False,
        description='Hide "(X% documented)" from the generated documents',
        command_line=CommandLine("--hide-documentation-coverage", flag=True),
        parse=parse_bool,
    )
    custom_categories: dict[str, Any] = config_attr(default_factory=dict)
    template_directory: Path = config_attr(
        default=PACKAGE_DIR / "templates",
        description="The directory that contains the mustache templates to use",
        command_line=CommandLine("--template-directory", "-t", metavar="DIRPATH"),
        parse=parse_path,
    )
    assets_directory: Path = config_attr(
        default=PACKAGE_DIR / "assets",
        description="The directory that contains the assets (CSS, JS, images) used by the templates",
        command_line=CommandLine("--assets-directory", metavar="DIRPATH"),
        parse=parse_path,
    )

    @classmethod
    def build(
        cls,
        directory: Path | None = None,
        metadata_reader: Callable[[Path], PodspecMetadata] = read_podspec,
    ) -> Config:
        """Create a fully-defaulted configuration.

        Starts from the literal defaults, then lets a podspec found in
        ``directory`` (default: the working directory) fill in the module
        name, version, and author. A missing podspec is normal; an
        unreadable one is logged and skipped.
        """
        config = cls()
        podspec = find_podspec(directory)
        if podspec is None:
            return config

        try:
            metadata = metadata_reader(podspec)
        except ConfigFileError as e:
            logger.warning("podspec_unreadable", podspec=str(podspec), error=e.message)
            return config

        apply_podspec(config, metadata)
        return config

    @classmethod
    def attributes(cls) -> list[Attribute]:
        return ATTRIBUTES.all()

    def to_dict(self) -> dict[str, Any]:
        """Every field as a JSON-friendly value, in declaration order."""
        return {attr.name: _plain(attr.get(self)) for attr in ATTRIBUTES}


def derive_dash_url(config: Config) -> str | None:
    """Default ``dash_url`` to ``<root_url>/docsets/<module_name>.xml``.

    Only applies when ``root_url`` is set and ``dash_url`` is not.
    """
    if config.root_url and not config.dash_url:
        config.dash_url = join_url(config.root_url, f"docsets/{config.module_name}.xml")
        logger.debug("dash_url_derived", dash_url=config.dash_url)
    return config.dash_url


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _plain(item) for key, item in value.items()}
    return value


__all__ = ["ATTRIBUTES", "PACKAGE_DIR", "Config", "derive_dash_url"]
