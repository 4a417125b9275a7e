"""Tests for the swiftdocs console entry point."""

import pytest

from swiftdocs.cli import main, render_config
from swiftdocs.config import Config, current_config, default_access_point


@pytest.fixture(autouse=True)
def plain_env(monkeypatch):
    for name in ("SWIFTDOCS_LOG_LEVEL", "SWIFTDOCS_LOG_JSON", "SWIFTDOCS_SHOW_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SWIFTDOCS_LOG_JSON", "true")


class TestMain:
    def test_success_installs_current_config(self):
        assert main(["--module", "RealmSwift", "--min-acl", "internal"]) == 0
        assert default_access_point().is_set
        assert current_config().module_name == "RealmSwift"
        assert current_config().min_acl.value == "internal"

    def test_unknown_flag(self, capsys):
        assert main(["--not-a-flag"]) == 2
        err = capsys.readouterr().err
        assert "error:" in err
        assert "--not-a-flag" in err
        assert "swiftdocs --help" in err
        assert not default_access_point().is_set

    def test_parse_error(self, capsys):
        assert main(["--root-url", "http://"]) == 2
        assert "root_url" in capsys.readouterr().err
        assert not default_access_point().is_set

    def test_config_file_error(self, workdir, capsys):
        path = workdir / "swiftdocs.toml"
        path.write_text("")
        assert main(["--config", str(path)]) == 1
        err = capsys.readouterr().err
        assert "swiftdocs --help" not in err
        assert ".toml" in err

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "--module" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-v"])
        assert exc_info.value.code == 0
        assert "swiftdocs version:" in capsys.readouterr().out

    def test_quiet_by_default(self, capsys):
        assert main([]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""

    def test_show_config(self, monkeypatch, capsys):
        monkeypatch.setenv("SWIFTDOCS_SHOW_CONFIG", "true")
        assert main(["--module", "Kit"]) == 0
        out = capsys.readouterr().out
        assert "swiftdocs configuration" in out
        assert "Kit" in out


class TestRenderConfig:
    def test_one_row_per_field(self):
        table = render_config(Config(module_name="Kit"))
        assert table.row_count == len(Config.attributes())
        assert [column.header for column in table.columns] == ["Option", "Value"]
