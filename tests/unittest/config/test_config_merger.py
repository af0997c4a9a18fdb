"""
Unit tests for ConfigMerger class.
"""

import json
import re

import pytest

from pr_pair.config.config_discovery import ConfigFile
from pr_pair.config.config_merger import ConfigMerger, to_snake_case
from pr_pair.errors import ConfigError


@pytest.fixture
def merger():
    """Create a ConfigMerger instance."""
    return ConfigMerger()


@pytest.fixture
def base_config():
    return {
        "checklist": {
            "standard_items": ["- [ ] Default A", "- [ ] Default B"],
            "file_patterns": [{"pattern": "a", "item": "- [ ] A"}],
            "filter_comments": True,
        },
        "github": {"add_as_comment": True},
    }


class TestMergeConfigs:
    """Test suite for merge_configs."""

    def test_user_list_replaces_default_list(self, merger, base_config):
        """Test that lists are replaced, never concatenated."""
        user_config = {"checklist": {"standard_items": ["- [ ] Only mine"]}}

        merged = merger.merge_configs(base_config, user_config)

        assert merged["checklist"]["standard_items"] == ["- [ ] Only mine"]
        assert merged["checklist"]["file_patterns"] == [{"pattern": "a", "item": "- [ ] A"}]

    def test_empty_list_removes_defaults(self, merger, base_config):
        merged = merger.merge_configs(base_config, {"checklist": {"file_patterns": []}})

        assert merged["checklist"]["file_patterns"] == []

    def test_missing_section_keeps_defaults(self, merger, base_config):
        merged = merger.merge_configs(base_config, {"github": {"add_as_comment": False}})

        assert merged["checklist"] == base_config["checklist"]
        assert merged["github"] == {"add_as_comment": False}

    def test_inputs_not_modified(self, merger, base_config):
        user_config = {"checklist": {"standard_items": ["- [ ] Mine"]}}

        merged = merger.merge_configs(base_config, user_config)
        merged["checklist"]["standard_items"].append("- [ ] Extra")

        assert base_config["checklist"]["standard_items"] == ["- [ ] Default A", "- [ ] Default B"]
        assert user_config["checklist"]["standard_items"] == ["- [ ] Mine"]

    def test_camel_case_keys(self, merger, base_config):
        """Test that camelCase keys override their snake_case defaults."""
        user_config = {
            "checklist": {"standardItems": ["- [ ] Mine"], "filterComments": False},
            "github": {"addAsComment": False},
        }

        merged = merger.merge_configs(base_config, user_config)

        assert merged["checklist"]["standard_items"] == ["- [ ] Mine"]
        assert merged["checklist"]["filter_comments"] is False
        assert merged["github"]["add_as_comment"] is False

    def test_unknown_section_ignored(self, merger, base_config):
        merged = merger.merge_configs(base_config, {"other": {"x": 1}})

        assert "other" not in merged

    def test_non_mapping_section(self, merger, base_config):
        with pytest.raises(ConfigError):
            merger.merge_configs(base_config, {"checklist": ["- [ ] Not a mapping"]})


class TestLoadConfigFile:
    """Test suite for load_config_file."""

    def test_load_python_module(self, merger, tmp_path):
        path = tmp_path / "pr-pair.config.py"
        path.write_text(
            "import re\n"
            "config = {'checklist': {'file_patterns': [\n"
            "    {'pattern': re.compile(r'prisma', re.IGNORECASE), 'item': '- [ ] Prisma'},\n"
            "]}}\n"
        )

        data = merger.load_config_file(ConfigFile.from_path(path))

        pattern = data["checklist"]["file_patterns"][0]["pattern"]
        assert isinstance(pattern, re.Pattern)
        assert pattern.flags & re.IGNORECASE

    def test_load_python_module_upper_case_name(self, merger, tmp_path):
        path = tmp_path / "pr-pair.config.py"
        path.write_text("CONFIG = {'github': {'add_as_comment': False}}\n")

        assert merger.load_config_file(ConfigFile.from_path(path)) == {"github": {"add_as_comment": False}}

    def test_python_module_without_config(self, merger, tmp_path):
        path = tmp_path / "pr-pair.config.py"
        path.write_text("settings = {}\n")

        with pytest.raises(ConfigError) as exc_info:
            merger.load_config_file(ConfigFile.from_path(path))

        assert exc_info.value.config_path == str(path)

    def test_python_module_raising(self, merger, tmp_path):
        path = tmp_path / "pr-pair.config.py"
        path.write_text("raise RuntimeError('boom')\n")

        with pytest.raises(ConfigError):
            merger.load_config_file(ConfigFile.from_path(path))

    def test_load_json(self, merger, tmp_path):
        path = tmp_path / ".pr-pairrc"
        path.write_text(json.dumps({"checklist": {"standardItems": ["- [ ] Mine"]}}))

        data = merger.load_config_file(ConfigFile.from_path(path))

        assert data == {"checklist": {"standardItems": ["- [ ] Mine"]}}

    def test_load_toml(self, merger, tmp_path):
        path = tmp_path / "pr-pair.config.toml"
        path.write_text(
            "[checklist]\n"
            "standard_items = [\"- [ ] Mine\"]\n"
            "\n"
            "[[checklist.content_patterns]]\n"
            "pattern = 'console\\.log'\n"
            "item = \"- [ ] Remove debug logs\"\n"
        )

        data = merger.load_config_file(ConfigFile.from_path(path))

        assert data["checklist"]["content_patterns"] == [
            {"pattern": r"console\.log", "item": "- [ ] Remove debug logs"}
        ]

    def test_invalid_json(self, merger, tmp_path):
        path = tmp_path / "pr-pair.config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError) as exc_info:
            merger.load_config_file(ConfigFile.from_path(path))

        assert "Error loading config" in str(exc_info.value)

    def test_top_level_must_be_mapping(self, merger, tmp_path):
        path = tmp_path / "pr-pair.config.json"
        path.write_text("[]")

        with pytest.raises(ConfigError):
            merger.load_config_file(ConfigFile.from_path(path))


class TestToSnakeCase:
    """Test suite for to_snake_case."""

    @pytest.mark.parametrize("key,expected", [
        ("addAsComment", "add_as_comment"),
        ("standardItems", "standard_items"),
        ("filter_comments", "filter_comments"),
        ("debug", "debug"),
    ])
    def test_conversion(self, key, expected):
        assert to_snake_case(key) == expected
