"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "link", "config", "brew", "zsh", "vscode", "app", "macos", "bootstrap", "cli"):
        config.addinivalue_line("markers", f"{marker}: tests for the {marker} domain")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def dots_env(tmp_path: Path, monkeypatch) -> dict:
    """Isolate every test: HOME, DOTS_HOME and ZSH_CUSTOM point into tmp_path.

    Returns dict with:
        - home: fake home directory (exists)
        - dots_home: dots state directory (created on demand)
        - dotfiles: default dotfiles checkout location (~/dotfiles, not created)
    """
    home = tmp_path / "home"
    home.mkdir()
    dots_home = tmp_path / "dots_home"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("DOTS_HOME", str(dots_home))
    monkeypatch.delenv("ZSH_CUSTOM", raising=False)
    return {"home": home, "dots_home": dots_home, "dotfiles": home / "dotfiles"}


@pytest.fixture
def home(dots_env: dict) -> Path:
    return dots_env["home"]


@pytest.fixture
def dotfiles(dots_env: dict) -> Path:
    """A dotfiles checkout with a populated home/ directory."""
    root = dots_env["dotfiles"]
    (root / "home").mkdir(parents=True)
    (root / "home" / ".zshrc").write_text("export EDITOR=vim\n")
    (root / "home" / ".gitconfig").write_text("[user]\n\tname = me\n")
    (root / "home" / "README.md").write_text("not a dotfile\n")
    return root


@pytest.fixture
def write_config(dots_env: dict):
    """Write a config.json under DOTS_HOME and return its path."""

    def _write(data: dict) -> Path:
        dots_home = dots_env["dots_home"]
        dots_home.mkdir(parents=True, exist_ok=True)
        path = dots_home / "config.json"
        path.write_text(json.dumps(data, indent=2))
        return path

    return _write


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
