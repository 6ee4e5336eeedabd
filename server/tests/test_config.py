"""
Tests for engine configuration loading.
"""

import os
import sys

# Add the server directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from lint_engine.config import EngineConfig, find_config_file, get_default_config, load_config


class TestLoadConfig:
    """Test cases for load_config."""

    def test_defaults(self):
        config = get_default_config()

        assert config == EngineConfig(enabled_rules=["*"], disabled_rules=[], log_level="WARNING")

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "nope.yml")) == get_default_config()

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "lintface.yml"
        path.write_text(
            "disabled_rules:\n  - python.print_call\nlog_level: debug\nunknown_key: 1\n",
            encoding="utf-8",
        )

        config = load_config(str(path))

        assert config.enabled_rules == ["*"]
        assert config.disabled_rules == ["python.print_call"]
        assert config.log_level == "DEBUG"

    def test_single_pattern_string_is_wrapped(self, tmp_path):
        path = tmp_path / "lintface.yml"
        path.write_text("enabled_rules: java.*\n", encoding="utf-8")

        assert load_config(str(path)).enabled_rules == ["java.*"]

    def test_invalid_yaml_falls_back(self, tmp_path, caplog):
        path = tmp_path / "lintface.yml"
        path.write_text("enabled_rules: [unclosed\n", encoding="utf-8")

        config = load_config(str(path))

        assert config == get_default_config()
        assert "Failed to load config" in caplog.text

    def test_non_mapping_falls_back(self, tmp_path):
        path = tmp_path / "lintface.yml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        assert load_config(str(path)) == get_default_config()

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "lintface.yml"
        path.write_text("", encoding="utf-8")

        assert load_config(str(path)) == get_default_config()


class TestFindConfigFile:
    """Test cases for find_config_file."""

    def test_finds_file_in_parent(self, tmp_path):
        (tmp_path / ".lintface.yml").write_text("log_level: INFO\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(str(nested)) == str(tmp_path / ".lintface.yml")

    def test_prefers_dotfile(self, tmp_path):
        (tmp_path / "lintface.yaml").write_text("", encoding="utf-8")
        (tmp_path / ".lintface.yml").write_text("", encoding="utf-8")

        assert find_config_file(str(tmp_path)) == str(tmp_path / ".lintface.yml")
