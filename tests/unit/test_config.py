"""Tests for Config loading and defaults."""

import pytest

from listmark.config import Config, ParserConfig, SerializerConfig
from listmark.exceptions import ConfigError
from listmark.tree.schema import ListStyle


class TestConfigDefaults:
    def test_default_config(self):
        cfg = Config.default()
        assert cfg.verbose is False
        assert cfg.parser.list_styles == [
            ListStyle.NUMBER,
            ListStyle.LOWER_ALPHA,
            ListStyle.UPPER_ALPHA,
        ]
        assert cfg.parser.headings is True
        assert cfg.serializer.block_separator == "\n\n"

    def test_load_none_returns_default(self):
        cfg = Config.load(None)
        assert cfg.verbose is False
        assert len(cfg.parser.list_styles) == 3

    def test_default_instances_are_independent(self):
        a = Config.default()
        b = Config.default()
        a.parser.list_styles.remove(ListStyle.NUMBER)
        assert ListStyle.NUMBER in b.parser.list_styles


class TestConfigFromYAML:
    def test_full_yaml(self):
        yaml_text = """\
verbose: true
parser:
  list_styles: [number, upper-alpha]
  headings: false
serializer:
  block_separator: "\\n"
"""
        cfg = Config.from_yaml_string(yaml_text)
        assert cfg.verbose is True
        assert cfg.parser.list_styles == [ListStyle.NUMBER, ListStyle.UPPER_ALPHA]
        assert cfg.parser.headings is False
        assert cfg.serializer.block_separator == "\n"

    def test_partial_yaml_uses_defaults(self):
        yaml_text = """\
parser:
  headings: false
"""
        cfg = Config.from_yaml_string(yaml_text)
        assert cfg.parser.headings is False
        # Defaults for everything else
        assert len(cfg.parser.list_styles) == 3
        assert cfg.serializer.block_separator == "\n\n"
        assert cfg.verbose is False

    def test_empty_yaml(self):
        cfg = Config.from_yaml_string("")
        assert cfg.verbose is False
        assert cfg.parser.headings is True

    def test_invalid_yaml_raises(self):
        with pytest.raises(ConfigError):
            Config.from_yaml_string("{{invalid yaml::")

    def test_non_mapping_root_raises(self):
        with pytest.raises(ConfigError, match="mapping"):
            Config.from_yaml_string("- a\n- b\n")

    def test_unknown_list_style_raises(self):
        with pytest.raises(ConfigError, match="roman"):
            Config.from_yaml_string("parser:\n  list_styles: [roman]\n")

    def test_unknown_keys_ignored(self):
        yaml_text = """\
parser:
  headings: true
  future_setting: 1
serializer:
  wrap_width: 80
"""
        cfg = Config.from_yaml_string(yaml_text)
        assert cfg.parser.headings is True
        assert cfg.serializer == SerializerConfig()


    @pytest.mark.parametrize(
        "yaml_text",
        [
            "parser: [1]\n",
            "serializer: text\n",
        ],
    )
    def test_non_mapping_section_raises(self, yaml_text):
        with pytest.raises(ConfigError, match="must be a mapping"):
            Config.from_yaml_string(yaml_text)

    def test_null_list_styles_raises(self):
        with pytest.raises(ConfigError, match="must be a list"):
            Config.from_yaml_string("parser:\n  list_styles: null\n")


class TestConfigFromFile:
    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            Config.from_yaml(tmp_path / "nonexistent.yaml")

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("verbose: true\nparser:\n  list_styles: [lower-alpha]\n")
        cfg = Config.from_yaml(config_file)
        assert cfg.verbose is True
        assert cfg.parser == ParserConfig(list_styles=[ListStyle.LOWER_ALPHA])
