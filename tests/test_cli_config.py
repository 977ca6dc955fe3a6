"""Tests for YAML settings loading and overrides."""

import pytest

from cli_config import apply_config_overrides, load_config, resolve_config_path
from constants import Constants


@pytest.fixture(autouse=True)
def restore_constants(monkeypatch):
    """Register the overridable attributes so monkeypatch restores them."""
    for attr in ("VS_VERSIONS", "VS_EDITIONS", "HEADERS_TOOL_DIR", "REMOTE_DIR"):
        monkeypatch.setattr(Constants, attr, getattr(Constants, attr))


class TestResolveConfigPath:
    """CLI beats environment."""

    def test_cli_wins(self, monkeypatch):
        monkeypatch.setenv(Constants.ENV_CONFIG, "/env.yml")
        assert resolve_config_path("/cli.yml") == "/cli.yml"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv(Constants.ENV_CONFIG, "/env.yml")
        assert resolve_config_path(None) == "/env.yml"

    def test_nothing(self, monkeypatch):
        monkeypatch.delenv(Constants.ENV_CONFIG, raising=False)
        assert resolve_config_path(None) is None


class TestLoadConfig:
    """Loading never raises."""

    def test_no_path(self):
        assert load_config(None) == {}

    def test_missing_file(self, tmp_path, caplog):
        assert load_config(str(tmp_path / "nope.yml")) == {}
        assert "Config file not found" in caplog.text

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("toolchain: [unclosed\n")
        assert load_config(str(path)) == {}

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n")
        assert load_config(str(path)) == {}

    def test_mapping(self, tmp_path):
        path = tmp_path / "preflight.yml"
        path.write_text("toolchain:\n  versions: ['2022']\n")
        assert load_config(str(path)) == {"toolchain": {"versions": ["2022"]}}


class TestApplyConfigOverrides:
    """Recognized keys land on Constants."""

    def test_toolchain_lists(self):
        apply_config_overrides({"toolchain": {"versions": [2022, 2019], "editions": ["BuildTools"]}})
        assert Constants.VS_VERSIONS == ["2022", "2019"]
        assert Constants.VS_EDITIONS == ["BuildTools"]

    def test_tool_dir_from_string(self):
        apply_config_overrides({"headers": {"tool_dir": "tools/gyp", "remote_dir": "server"}})
        assert Constants.HEADERS_TOOL_DIR == ("tools", "gyp")
        assert Constants.REMOTE_DIR == "server"

    def test_unknown_key_ignored(self, caplog):
        apply_config_overrides({"node": {"supported": ">=10"}})
        assert "Ignoring unknown config key: node.supported" in caplog.text
        assert Constants.NODE_SUPPORTED_SPEC == ">=16.14.0"

    def test_invalid_value_ignored(self):
        before = list(Constants.VS_VERSIONS)
        apply_config_overrides({"toolchain": {"versions": []}})
        assert Constants.VS_VERSIONS == before
