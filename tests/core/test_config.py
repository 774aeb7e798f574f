"""Tests for configuration system."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from recordproxy.core.config import Config, config_properties
from recordproxy.demo import DemoProperties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"recordproxy": {"logging": {"format": "json"}}})
        assert config.get("recordproxy.logging.format") == "json"

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_false_value_is_not_default(self):
        config = Config({"recordproxy": {"demo": {"forward_reads": False}}})
        assert config.get("recordproxy.demo.forward_reads", True) is False

    def test_packaged_defaults(self):
        config = Config.from_file()
        assert config.get("recordproxy.logging.format") == "console"
        assert config.get("recordproxy.logging.level.root") == "INFO"
        assert config.loaded_sources == ["recordproxy-defaults.yaml (defaults)"]

    def test_yaml_file_overlays_defaults(self, tmp_path: Path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("recordproxy:\n  logging:\n    format: plain\n")
        config = Config.from_file(config_file)
        assert config.get("recordproxy.logging.format") == "plain"
        assert config.get("recordproxy.logging.level.root") == "INFO"
        assert config.loaded_sources[-1] == str(config_file)

    def test_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "settings.toml"
        config_file.write_text('[recordproxy.logging]\nformat = "json"\n')
        config = Config.from_file(config_file, load_defaults=False)
        assert config.get("recordproxy.logging.format") == "json"

    def test_missing_file_keeps_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("recordproxy.logging.format") == "console"

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("RECORDPROXY_LOGGING_FORMAT", "json")
        config = Config({"recordproxy": {"logging": {"format": "console"}}})
        assert config.get("recordproxy.logging.format") == "json"

    def test_with_overrides(self):
        config = Config({"recordproxy": {"logging": {"format": "console", "level": {"root": "INFO"}}}})
        merged = config.with_overrides({"recordproxy": {"logging": {"format": "plain"}}})
        assert merged.get("recordproxy.logging.format") == "plain"
        assert merged.get("recordproxy.logging.level.root") == "INFO"
        assert config.get("recordproxy.logging.format") == "console"

    def test_get_section(self):
        config = Config({"recordproxy": {"logging": {"level": {"root": "INFO", "myapp": "DEBUG"}}}})
        assert config.get_section("recordproxy.logging.level") == {"root": "INFO", "myapp": "DEBUG"}
        assert config.get_section("recordproxy.nothing") == {}


class TestPlaceholders:
    def test_env_placeholder(self, monkeypatch):
        monkeypatch.setenv("LOG_FMT", "json")
        config = Config({"recordproxy": {"logging": {"format": "${LOG_FMT}"}}})
        assert config.get("recordproxy.logging.format") == "json"

    def test_config_reference(self):
        config = Config({"base": {"fmt": "plain"}, "recordproxy": {"logging": {"format": "${base.fmt}"}}})
        assert config.get("recordproxy.logging.format") == "plain"

    def test_default_value(self):
        config = Config({"recordproxy": {"logging": {"format": "${UNSET_RECORDPROXY_FMT:console}"}}})
        assert config.get("recordproxy.logging.format") == "console"

    def test_unresolvable_raises(self):
        config = Config({"recordproxy": {"logging": {"format": "${UNSET_RECORDPROXY_FMT}"}}})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("recordproxy.logging.format")


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="app.limits")
        @dataclass
        class Limits:
            retries: int = 1
            strict: bool = False

        config = Config({"app": {"limits": {"retries": "3", "strict": "yes"}}})
        limits = config.bind(Limits)
        assert limits.retries == 3
        assert limits.strict is True

    def test_bind_uses_defaults(self):
        assert Config({}).bind(DemoProperties).forward_reads is False

    def test_bind_reads_env(self, monkeypatch):
        monkeypatch.setenv("RECORDPROXY_DEMO_FORWARD_READS", "true")
        assert Config.from_file().bind(DemoProperties).forward_reads is True

    def test_bind_undecorated_raises(self):
        @dataclass
        class Plain:
            x: int = 0

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)


class TestOverrides:
    def test_override_beats_environment(self, monkeypatch):
        monkeypatch.setenv("RECORDPROXY_LOGGING_FORMAT", "json")
        config = Config.from_file().with_overrides({"recordproxy": {"logging": {"format": "plain"}}})
        assert config.get("recordproxy.logging.format") == "plain"

    def test_environment_still_applies_to_other_keys(self, monkeypatch):
        monkeypatch.setenv("RECORDPROXY_LOGGING_LEVEL_ROOT", "ERROR")
        config = Config.from_file().with_overrides({"recordproxy": {"logging": {"format": "plain"}}})
        assert config.get("recordproxy.logging.level.root") == "ERROR"

    def test_overrides_accumulate(self, monkeypatch):
        monkeypatch.setenv("RECORDPROXY_LOGGING_FORMAT", "json")
        monkeypatch.setenv("RECORDPROXY_DEMO_FORWARD_READS", "true")
        config = (
            Config.from_file()
            .with_overrides({"recordproxy": {"logging": {"format": "plain"}}})
            .with_overrides({"recordproxy": {"demo": {"forward_reads": False}}})
        )
        assert config.get("recordproxy.logging.format") == "plain"
        assert config.bind(DemoProperties).forward_reads is False
