"""Unit tests for dots.api.zsh.cmd_setup."""

import subprocess
from unittest.mock import MagicMock

import pytest

from dots.api.zsh.cmd_setup import cmd_setup
from tests.unit.conftest import completed, run_cmd

pytestmark = pytest.mark.zsh

PLUGINS = ["zsh-autosuggestions", "zsh-syntax-highlighting", "zsh-completions"]


def _commands(run: MagicMock) -> list[list[str]]:
    return [c[0][0] for c in run.call_args_list]


def test_installs_oh_my_zsh_and_clones_plugins(home, monkeypatch):
    run = MagicMock(return_value=completed([], stdout="echo omz"))
    monkeypatch.setattr(subprocess, "run", run)

    result = run_cmd(cmd_setup)

    assert result.success is True
    assert result.output["oh_my_zsh_installed"] is True
    assert result.output["plugins_cloned"] == PLUGINS
    commands = _commands(run)
    assert commands[0][:2] == ["curl", "-fsSL"]
    assert commands[1] == ["sh", "-c", "echo omz", "", "--unattended"]
    assert commands[2] == [
        "git",
        "clone",
        "https://github.com/zsh-users/zsh-autosuggestions",
        str(home / ".oh-my-zsh" / "custom" / "plugins" / "zsh-autosuggestions"),
    ]
    assert len(commands) == 5


def test_existing_install_and_plugins_are_left_alone(home, monkeypatch):
    plugins_dir = home / ".oh-my-zsh" / "custom" / "plugins"
    for name in PLUGINS:
        (plugins_dir / name).mkdir(parents=True)
    run = MagicMock()
    monkeypatch.setattr(subprocess, "run", run)

    result = run_cmd(cmd_setup)

    assert result.success is True
    assert result.output["oh_my_zsh_installed"] is False
    assert result.output["plugins_present"] == PLUGINS
    assert result.output["plugins_cloned"] == []
    run.assert_not_called()


def test_zsh_custom_overrides_plugin_location(home, tmp_path, monkeypatch):
    (home / ".oh-my-zsh").mkdir()
    custom = tmp_path / "zsh-custom"
    monkeypatch.setenv("ZSH_CUSTOM", str(custom))
    run = MagicMock(return_value=completed([]))
    monkeypatch.setattr(subprocess, "run", run)

    result = run_cmd(cmd_setup)

    assert result.success is True
    assert {c[-1] for c in _commands(run)} == {str(custom / "plugins" / name) for name in PLUGINS}


def test_clone_failure_stops(home, monkeypatch):
    (home / ".oh-my-zsh").mkdir()
    error = subprocess.CalledProcessError(128, ["git"], stderr="fatal: unable to access\n")
    run = MagicMock(side_effect=[completed([]), error])
    monkeypatch.setattr(subprocess, "run", run)

    result = run_cmd(cmd_setup)

    assert result.success is False
    assert result.output["plugins_cloned"] == ["zsh-autosuggestions"]
    assert "fatal: unable to access" in result.output["errors"][0]
    assert run.call_count == 2


def test_missing_curl(home, monkeypatch):
    monkeypatch.setattr(subprocess, "run", MagicMock(side_effect=FileNotFoundError("curl")))

    result = run_cmd(cmd_setup)

    assert result.success is False
    assert result.output["errors"][0].startswith("Oh My Zsh installation failed")
