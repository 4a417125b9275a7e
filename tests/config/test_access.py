"""Tests for the current-configuration access point."""

import threading

from swiftdocs.config import (
    Config,
    ConfigMixin,
    current_config,
    default_access_point,
    set_current_config,
)
from swiftdocs.config.access import ConfigAccessPoint


class TestConfigAccessPoint:
    def test_lazy_initialization(self):
        built = []

        def factory():
            built.append(True)
            return Config(module_name="Lazy")

        access = ConfigAccessPoint(factory)
        assert not access.is_set
        assert built == []
        assert access.current().module_name == "Lazy"
        assert access.current() is access.current()
        assert built == [True]

    def test_single_instance_across_threads(self):
        barrier = threading.Barrier(8)
        access = ConfigAccessPoint(Config)
        seen = []

        def read():
            barrier.wait()
            seen.append(access.current())

        threads = [threading.Thread(target=read) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(seen) == 8
        assert all(config is seen[0] for config in seen)

    def test_set_and_clear(self):
        access = ConfigAccessPoint(Config)
        replacement = Config(module_name="Replaced")
        access.set_current(replacement)
        assert access.current() is replacement

        access.set_current(None)
        assert not access.is_set
        assert access.current() is not replacement

    def test_override_restores_previous(self):
        access = ConfigAccessPoint(Config)
        original = access.current()
        with access.override(Config(module_name="Temp")) as temp:
            assert access.current() is temp
        assert access.current() is original

    def test_override_restores_on_error(self):
        access = ConfigAccessPoint(Config)
        access.reset()
        try:
            with access.override(Config(module_name="Temp")):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert not access.is_set


class TestDefaultAccessPoint:
    def test_current_config_is_defaulted(self, json_podspec):
        config = current_config()
        assert config.module_name == "RealmSwift"
        assert current_config() is config

    def test_set_current_config(self):
        config = Config(module_name="Installed")
        set_current_config(config)
        assert default_access_point().is_set
        assert current_config() is config


class TestConfigMixin:
    class Renderer(ConfigMixin):
        def title(self):
            return f"{self.config.module_name} Reference"

    def test_uses_current_config(self):
        set_current_config(Config(module_name="Global"))
        assert self.Renderer().title() == "Global Reference"

    def test_instance_config_wins(self):
        set_current_config(Config(module_name="Global"))
        renderer = self.Renderer().use_config(Config(module_name="Local"))
        assert renderer.title() == "Local Reference"
