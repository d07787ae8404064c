"""Unit tests for dots.api.vscode.cmd_export."""

import subprocess
from unittest.mock import MagicMock

import pytest

from dots.api.vscode.cmd_export import cmd_export
from tests.unit.conftest import completed, run_cmd

pytestmark = pytest.mark.vscode

LISTING = "esbenp.prettier-vscode\nvscjava.vscode-java-debug\nms-python.python\n\nvscjava.vscode-maven\n"


def test_export_filters_excluded_prefixes(home, monkeypatch):
    run = MagicMock(return_value=completed(["code", "--list-extensions"], stdout=LISTING))
    monkeypatch.setattr(subprocess, "run", run)

    result = run_cmd(cmd_export)

    assert result.success is True
    assert run.call_args[0][0] == ["code", "--list-extensions"]
    path = home / "dotfiles" / "vscode" / "extensions.txt"
    assert path.read_text() == "esbenp.prettier-vscode\nms-python.python\n"
    assert result.output["extensions"] == ["esbenp.prettier-vscode", "ms-python.python"]
    assert result.output["excluded"] == ["vscjava.vscode-java-debug", "vscjava.vscode-maven"]


def test_export_with_no_exclusions(home, monkeypatch, write_config):
    write_config({"vscode": {"exclude_extension_prefixes": []}})
    monkeypatch.setattr(subprocess, "run", MagicMock(return_value=completed([], stdout=LISTING)))

    result = run_cmd(cmd_export)

    assert len(result.output["extensions"]) == 4
    assert result.output["excluded"] == []


def test_export_code_missing(home, monkeypatch):
    monkeypatch.setattr(subprocess, "run", MagicMock(side_effect=FileNotFoundError("code")))

    result = run_cmd(cmd_export)

    assert result.success is False
    assert "not found" in result.output["errors"][0]
    assert not (home / "dotfiles" / "vscode" / "extensions.txt").exists()
