"""
Shared pytest fixtures for swiftdocs tests.

This module provides:
- An isolated working directory per test, so podspec discovery and the
  ``source_directory`` default never see the repository itself
- Access point and settings cleanup for test isolation
- Quiet, stderr-only structured logging
"""

import json
import sys
from pathlib import Path

import pytest

# Ensure swiftdocs package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from swiftdocs.config import default_access_point
from swiftdocs.logging import configure_logging
from swiftdocs.settings import clear_settings_cache


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Only warnings and errors, as JSON on stderr."""
    configure_logging(level="WARNING", json_format=True)


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def clean_access_point():
    """Clear the current configuration before and after each test."""
    default_access_point().reset()
    clear_settings_cache()
    yield
    default_access_point().reset()
    clear_settings_cache()


@pytest.fixture
def json_podspec(workdir):
    """A JSON podspec in the working directory."""
    path = workdir / "RealmSwift.podspec.json"
    path.write_text(
        json.dumps(
            {
                "name": "RealmSwift",
                "version": "0.92.3",
                "authors": {"Realm": "help@realm.io"},
                "summary": "Realm is a modern data framework & database for iOS & OS X.",
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def ruby_podspec(workdir):
    """A Ruby podspec in the working directory."""
    path = workdir / "Alamofire.podspec"
    path.write_text(
        "Pod::Spec.new do |s|\n"
        "  s.name = 'Alamofire'\n"
        "  s.version = \"3.1.2\"\n"
        "  s.license = 'MIT'\n"
        "  s.authors = { 'Alamofire Software Foundation' => 'info@alamofire.org' }\n"
        "  s.source = { :git => 'https://github.com/Alamofire/Alamofire.git' }\n"
        "end\n",
        encoding="utf-8",
    )
    return path
