"""Tests for process-level settings."""

from swiftdocs.settings import SwiftDocsSettings, clear_settings_cache, get_settings


class TestSwiftDocsSettings:
    def test_defaults(self, monkeypatch):
        for name in ("SWIFTDOCS_LOG_LEVEL", "SWIFTDOCS_LOG_JSON", "SWIFTDOCS_SHOW_CONFIG"):
            monkeypatch.delenv(name, raising=False)
        settings = SwiftDocsSettings()
        assert settings.log_level == "WARNING"
        assert settings.log_json is None
        assert settings.show_config is False

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("SWIFTDOCS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SWIFTDOCS_LOG_JSON", "true")
        monkeypatch.setenv("SWIFTDOCS_SHOW_CONFIG", "1")
        settings = SwiftDocsSettings()
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert settings.show_config is True

    def test_dotenv_file(self, workdir, monkeypatch):
        monkeypatch.delenv("SWIFTDOCS_LOG_LEVEL", raising=False)
        (workdir / ".env").write_text("SWIFTDOCS_LOG_LEVEL=ERROR\n")
        assert SwiftDocsSettings().log_level == "ERROR"


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SWIFTDOCS_LOG_LEVEL", "INFO")
        assert get_settings() is first
        reloaded = get_settings(_force_reload=True)
        assert reloaded is not first
        assert reloaded.log_level == "INFO"

    def test_clear_cache(self):
        first = get_settings()
        clear_settings_cache()
        assert get_settings() is not first
