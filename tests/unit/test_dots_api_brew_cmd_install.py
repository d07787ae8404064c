"""Unit tests for dots.api.brew.cmd_install."""

import pytest

from dots.api.brew.cmd_install import cmd_install
from tests.unit.conftest import FakeInstaller, run_cmd

pytestmark = pytest.mark.brew


def test_cmd_install_runs_bundle(home):
    installer = FakeInstaller()

    result = run_cmd(cmd_install, installer=installer)

    assert result.success is True
    assert result.output["installed"] is True
    assert result.output["bootstrapped"] is False
    assert installer.calls == [("install", home / "dotfiles" / "Brewfile")]
    assert result.output["brewfile"] == str(home / "dotfiles" / "Brewfile")


def test_cmd_install_without_homebrew_fails():
    installer = FakeInstaller(available=False)

    result = run_cmd(cmd_install, installer=installer)

    assert result.success is False
    assert result.output["errors"] == ["Homebrew is not installed. Install it first: https://brew.sh"]
    assert installer.calls == []


def test_cmd_install_bootstrap_installs_homebrew_first():
    installer = FakeInstaller(available=False)

    result = run_cmd(cmd_install, bootstrap=True, installer=installer)

    assert result.success is True
    assert result.output["bootstrapped"] is True
    assert [c[0] for c in installer.calls] == ["bootstrap", "install"]


def test_cmd_install_bootstrap_skipped_when_available():
    installer = FakeInstaller()

    result = run_cmd(cmd_install, bootstrap=True, installer=installer)

    assert result.output["bootstrapped"] is False
    assert [c[0] for c in installer.calls] == ["install"]


def test_cmd_install_bootstrap_failure():
    installer = FakeInstaller(available=False, fail="bootstrap")

    result = run_cmd(cmd_install, bootstrap=True, installer=installer)

    assert result.success is False
    assert result.output["errors"] == ["installer download failed"]
    assert [c[0] for c in installer.calls] == ["bootstrap"]


def test_cmd_install_bundle_failure():
    result = run_cmd(cmd_install, installer=FakeInstaller(fail="install"))

    assert result.success is False
    assert "formula not found" in result.output["errors"][0]
    assert result.output["installed"] is False


def test_cmd_install_uses_configured_brewfile(write_config, tmp_path):
    brewfile = tmp_path / "Brewfile.work"
    write_config({"brew": {"brewfile": str(brewfile)}})
    installer = FakeInstaller()

    run_cmd(cmd_install, installer=installer)

    assert installer.calls == [("install", brewfile)]
