"""Tests for configuration loading and validation."""

import json
from pathlib import Path

import pytest

from cxxtool.config import default_config_path, load_config, normalize_config
from cxxtool.exceptions import ConfigError

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def minimal():
    return {"product": "foo", "version": "1.2.3", "source": "/src"}


class TestNormalizeConfig:
    def test_defaults_and_derived_values(self, minimal):
        config = normalize_config(minimal)
        assert config["prefix"] == "FOO"
        assert (config["versionMajor"], config["versionMinor"], config["versionPatch"]) == (1, 2, 3)
        assert config["exclude"] == []
        assert config["indentSize"] == 2
        assert config["tools"] == {}

    def test_does_not_mutate_input(self, minimal):
        normalize_config(minimal)
        assert "prefix" not in minimal

    def test_short_version(self, minimal):
        minimal["version"] = "2"
        config = normalize_config(minimal)
        assert (config["versionMajor"], config["versionMinor"], config["versionPatch"]) == (2, 0, 0)

    def test_explicit_prefix(self, minimal):
        minimal["prefix"] = "FOOLIB"
        assert normalize_config(minimal)["prefix"] == "FOOLIB"

    @pytest.mark.parametrize("product", [None, 42])
    def test_missing_product(self, minimal, product):
        minimal["product"] = product
        with pytest.raises(ConfigError, match="Missing product name"):
            normalize_config(minimal)

    @pytest.mark.parametrize("product", ["1foo", "foo-bar", ""])
    def test_invalid_product(self, minimal, product):
        minimal["product"] = product
        with pytest.raises(ConfigError, match="Invalid product name"):
            normalize_config(minimal)

    def test_missing_version(self, minimal):
        del minimal["version"]
        with pytest.raises(ConfigError, match="Missing product version"):
            normalize_config(minimal)

    @pytest.mark.parametrize("version", ["1.2.3.4", "x", "1..2", "1.2."])
    def test_invalid_version(self, minimal, version):
        minimal["version"] = version
        with pytest.raises(ConfigError, match="Invalid product version"):
            normalize_config(minimal)

    def test_unquoted_yaml_version(self, minimal):
        minimal["version"] = 1.2
        with pytest.raises(ConfigError, match="quote"):
            normalize_config(minimal)

    def test_missing_source(self, minimal):
        del minimal["source"]
        with pytest.raises(ConfigError, match="source"):
            normalize_config(minimal)

    def test_invalid_indent_size(self, minimal):
        minimal["indentSize"] = "wide"
        with pytest.raises(ConfigError, match="indentSize"):
            normalize_config(minimal)

    def test_invalid_tools(self, minimal):
        minimal["tools"] = ["NoTabs"]
        with pytest.raises(ConfigError, match="tools"):
            normalize_config(minimal)

    def test_config_error_is_value_error(self, minimal):
        del minimal["product"]
        with pytest.raises(ValueError):
            normalize_config(minimal)


class TestLoadConfig:
    def test_loads_fixture(self):
        config = load_config(FIXTURES / "project" / "cxxconfig.yaml")
        assert config["product"] == "foo"
        assert config["exclude"] == ["vendor"]
        assert config["tools"]["ExpandTemplates"] is True
        assert Path(config["source"]) == (FIXTURES / "project" / "src").resolve()

    def test_loads_json(self, tmp_path):
        path = tmp_path / "cxxconfig.json"
        path.write_text(json.dumps({"product": "bar", "version": "0.1", "source": "/abs/src"}))
        config = load_config(path)
        assert config["prefix"] == "BAR"
        assert config["source"] == "/abs/src"

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "cxxconfig.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="not a mapping"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_default_path_from_environment(self, monkeypatch):
        monkeypatch.setenv("CXXTOOL_CONFIG", "/etc/cxx.yaml")
        assert default_config_path() == Path("/etc/cxx.yaml")

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv("CXXTOOL_CONFIG", raising=False)
        assert default_config_path() == Path("cxxconfig.yaml")
