"""Unit tests for dots.api.config.cmd_show."""

import pytest

from dots.api.config.cmd_show import cmd_show
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.config


def test_cmd_show_lists_sections_with_defaults_warning():
    result = run_cmd(cmd_show)

    assert result.success is True
    assert result.output["section"] == ""
    assert result.output["content"]["sections"] == ["dotfiles_dir", "link", "brew", "zsh", "vscode", "apps", "macos"]
    assert result.output["exists"] is False
    assert any("showing defaults" in w for w in result.output["warnings"])


def test_cmd_show_section(write_config):
    write_config({"brew": {"brewfile": "Brewfile.mac"}})

    result = run_cmd(cmd_show, "brew")

    assert result.success is True
    assert result.output["content"]["brewfile"] == "Brewfile.mac"
    assert result.output["exists"] is True
    assert result.output["warnings"] == []


def test_cmd_show_scalar_section_is_wrapped():
    result = run_cmd(cmd_show, "dotfiles_dir")

    assert result.success is True
    assert result.output["content"] == {"dotfiles_dir": "~/dotfiles"}


def test_cmd_show_unknown_section():
    result = run_cmd(cmd_show, "nope")

    assert result.success is False
    assert result.output["errors"] == ["Unknown section: nope"]


def test_cmd_show_invalid_config(write_config):
    write_config({"link": {"extra": "not-a-list"}})

    result = run_cmd(cmd_show, "link")

    assert result.success is False
    assert "Configuration validation error" in result.output["errors"][0]
