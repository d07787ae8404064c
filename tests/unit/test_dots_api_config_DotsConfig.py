"""Unit tests for dots.api.config.DotsConfig."""

import json
from pathlib import Path

import pytest

from dots.api.config.DotsConfig import DotsConfig
from dots.api.config.get_home_dir import get_home_dir

pytestmark = pytest.mark.config


def test_missing_file_gives_defaults():
    config = DotsConfig.load()

    assert config == DotsConfig()
    assert config.dotfiles_dir == "~/dotfiles"
    assert config.link.home_dir == "home"
    assert config.link.config_dir is None
    assert set(config.apps) == {"claude", "gemini"}
    assert not any(app.auto_install for app in config.apps.values())


def test_get_config_path_uses_dots_home(dots_env):
    assert DotsConfig.get_config_path() == dots_env["dots_home"].resolve() / "config.json"


def test_get_home_dir_defaults_to_home(monkeypatch, home):
    monkeypatch.delenv("DOTS_HOME")
    assert get_home_dir() == Path.home() / ".dots"
    assert get_home_dir("config.json") == Path.home() / ".dots" / "config.json"


def test_load_partial_file(write_config):
    write_config({"dotfiles_dir": "~/src/dotfiles", "brew": {"brewfile": "mac/Brewfile"}})

    config = DotsConfig.load()

    assert config.dotfiles_dir == "~/src/dotfiles"
    assert config.brew.brewfile == "mac/Brewfile"
    assert config.zsh.oh_my_zsh_dir == "~/.oh-my-zsh"


def test_load_invalid_json(dots_env):
    dots_env["dots_home"].mkdir(parents=True, exist_ok=True)
    (dots_env["dots_home"] / "config.json").write_text("{not json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        DotsConfig.load()


def test_load_non_object(write_config, dots_env):
    path = write_config({})
    path.write_text(json.dumps(["a", "b"]))

    with pytest.raises(ValueError, match="must contain a JSON object"):
        DotsConfig.load()


def test_load_unknown_field(write_config):
    write_config({"unknown_section": {}})

    with pytest.raises(ValueError, match="Configuration validation error: unknown_section"):
        DotsConfig.load()


def test_load_nested_error_names_field(write_config):
    write_config({"vscode": {"profiles": {"abc": 3}}})

    with pytest.raises(ValueError, match=r"vscode\.profiles\.abc"):
        DotsConfig.load()


def test_save_round_trips_through_load(home):
    config = DotsConfig(dotfiles_dir="~/code/dotfiles")
    config.save()

    assert DotsConfig.get_config_path().exists()
    assert DotsConfig.load() == config
    assert not DotsConfig.get_config_path().with_suffix(".json.tmp").exists()


def test_save_failure_raises_runtime_error(dots_env):
    # config.json is a directory, so the final rename fails
    DotsConfig.get_config_path().mkdir(parents=True)

    with pytest.raises(RuntimeError, match="Failed to save config"):
        DotsConfig().save()


def test_source_path_resolution(home, tmp_path):
    config = DotsConfig()

    assert config.dotfiles_path == home / "dotfiles"
    assert config.source_path("home") == home / "dotfiles" / "home"
    assert config.source_path("~/other") == home / "other"
    assert config.source_path(str(tmp_path / "abs")) == tmp_path / "abs"


def test_to_dict_is_json_serializable():
    data = DotsConfig().to_dict()

    json.dumps(data)
    assert list(data) == ["dotfiles_dir", "link", "brew", "zsh", "vscode", "apps", "macos"]
