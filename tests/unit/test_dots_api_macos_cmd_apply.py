"""Unit tests for dots.api.macos.cmd_apply."""

import platform
import subprocess
from unittest.mock import MagicMock

import pytest

from dots.api.macos.cmd_apply import cmd_apply
from dots.api.macos.DefaultsEntry import DefaultsEntry
from dots.api.macos.DefaultsPreferenceStore import DefaultsPreferenceStore
from dots.api.macos.MacosConfig import MacosConfig
from tests.unit.conftest import FakeStore, completed, run_cmd

pytestmark = pytest.mark.macos


@pytest.fixture
def on_darwin(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Darwin")


def test_apply_writes_everything(on_darwin, home):
    store = FakeStore()

    result = run_cmd(cmd_apply, store=store)

    total = len(MacosConfig().defaults)
    assert result.success is True
    assert result.output["written"] == total
    assert len(store.written) == total
    assert store.quit == ["System Preferences"]
    assert store.unhidden == [home / "Library"]
    assert store.restarted == ["Dock", "Finder", "Safari", "SystemUIServer"]
    assert result.output["restarted"] == ["Dock", "Finder", "SystemUIServer"]
    assert result.output["warnings"] == ["Some changes require a logout/restart to take effect."]


def test_apply_continues_after_failed_entry(on_darwin):
    store = FakeStore(fail_keys={"KeyRepeat", "tilesize"})

    result = run_cmd(cmd_apply, store=store)

    assert result.success is False
    assert result.output["failed"] == 2
    assert result.output["written"] == len(MacosConfig().defaults) - 2
    assert any("KeyRepeat" in e for e in result.output["errors"])
    assert "disable-shadow" in [e.key for e in store.written]
    assert store.restarted


def test_apply_refuses_other_platforms(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Linux")
    store = FakeStore()

    result = run_cmd(cmd_apply, store=store)

    assert result.success is False
    assert "darwin" in result.output["errors"][0]
    assert store.written == []
    assert store.quit == []


def test_apply_configured_entries(on_darwin, write_config):
    write_config(
        {
            "macos": {
                "defaults": [{"domain": "com.apple.dock", "key": "autohide", "type": "bool", "value": False}],
                "quit_apps": [],
                "unhide_paths": [],
                "restart_apps": ["Dock"],
            }
        }
    )
    store = FakeStore()

    result = run_cmd(cmd_apply, store=store)

    assert result.output["written"] == 1
    assert store.written[0].value is False


def test_defaults_store_wraps_failures(monkeypatch):
    error = subprocess.CalledProcessError(1, ["defaults"], stderr="Could not write domain")
    monkeypatch.setattr(subprocess, "run", MagicMock(side_effect=error))
    entry = DefaultsEntry(domain="com.apple.dock", key="autohide", type="bool", value=True)

    with pytest.raises(RuntimeError, match="Could not write domain"):
        DefaultsPreferenceStore().write(entry)


def test_defaults_store_restart_reports_exit_status(monkeypatch):
    run = MagicMock(side_effect=[completed(["killall", "Dock"]), completed(["killall", "Safari"], returncode=1)])
    monkeypatch.setattr(subprocess, "run", run)
    store = DefaultsPreferenceStore()

    assert store.restart_app("Dock") is True
    assert store.restart_app("Safari") is False
    assert run.call_args_list[0][0][0] == ["killall", "Dock"]
