"""Tests for configuration management."""

import copy

import pytest

from dirbuf import config
from dirbuf.config import (
    DEFAULT_CONFIG,
    _merge_config,
    create_default_config,
    get_navigator_settings,
    get_style_colors,
    load_config,
)
from dirbuf.layout import Signs


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the module at a throwaway config file."""
    path = tmp_path / "dirbuf.toml"
    monkeypatch.setattr(config, "CONFIG_FILE", path)
    return path


def test_missing_file_returns_defaults(config_file):
    assert load_config() == DEFAULT_CONFIG


def test_default_config_not_mutated(config_file):
    """Test that DEFAULT_CONFIG is not mutated by load_config()."""
    original_default = copy.deepcopy(DEFAULT_CONFIG)

    loaded = load_config()
    loaded["navigation"]["show_hidden_files"] = True
    loaded["colors"]["directory"] = "red"

    assert DEFAULT_CONFIG == original_default
    assert load_config()["colors"]["directory"] == "blue_bold"


def test_merge_config_not_mutated():
    """Test that _merge_config doesn't mutate the default config."""
    original_default = copy.deepcopy(DEFAULT_CONFIG)

    merged = _merge_config(DEFAULT_CONFIG, {"signs": {"directory": "+"}})
    merged["signs"]["file"] = "-"

    assert DEFAULT_CONFIG == original_default
    assert merged["signs"]["directory"] == "+"


def test_user_file_merged_with_defaults(config_file):
    config_file.write_text(
        '[navigation]\nshow_hidden_files = true\n\n[colors]\nlink = "red_bold"\n',
        encoding="utf-8",
    )
    loaded = load_config()
    assert loaded["navigation"]["show_hidden_files"] is True
    assert loaded["navigation"]["show_size"] is False
    assert loaded["colors"]["link"] == "red_bold"
    assert loaded["colors"]["time"] == DEFAULT_CONFIG["colors"]["time"]


def test_corrupted_file_falls_back_to_defaults(config_file):
    config_file.write_text("[navigation\nshow_hidden_files = ", encoding="utf-8")
    assert load_config() == DEFAULT_CONFIG


def test_create_default_config_writes_once(config_file):
    assert create_default_config() is True
    assert config_file.exists()
    assert load_config() == DEFAULT_CONFIG

    config_file.write_text('[signs]\ndirectory = "+"\n', encoding="utf-8")
    assert create_default_config() is False
    assert load_config()["signs"]["directory"] == "+"


def test_navigator_settings_from_defaults():
    settings = get_navigator_settings(copy.deepcopy(DEFAULT_CONFIG))
    assert settings.show_hidden_files is False
    assert settings.show_size is False
    assert settings.signs == Signs()


def test_navigator_settings_from_user_values():
    user = _merge_config(
        DEFAULT_CONFIG,
        {"navigation": {"show_hidden_files": True, "show_size": True}, "signs": {"directory": "▸"}},
    )
    settings = get_navigator_settings(user)
    assert settings.show_hidden_files is True
    assert settings.show_size is True
    assert settings.signs == Signs(directory="▸", file=" ")


def test_navigator_settings_loads_file_when_not_given(config_file):
    config_file.write_text("[navigation]\nshow_size = true\n", encoding="utf-8")
    assert get_navigator_settings().show_size is True


def test_style_colors(config_file):
    assert get_style_colors()["directory"] == "blue_bold"
    assert get_style_colors({"colors": {"directory": "cyan"}}) == {"directory": "cyan"}
