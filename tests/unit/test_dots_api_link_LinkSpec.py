"""Unit tests for dots.api.link.LinkSpec."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dots.api.link.LinkSpec import LinkSpec

pytestmark = pytest.mark.link


def test_backup_path_appends_suffix():
    spec = LinkSpec(source=Path("/d/home/.zshrc"), target=Path("/h/.zshrc"))
    assert spec.backup == Path("/h/.zshrc.backup")


def test_accepts_strings():
    spec = LinkSpec(source="/d/x", target="/h/x")  # type: ignore[arg-type]
    assert spec.source == Path("/d/x")


def test_is_frozen():
    spec = LinkSpec(source=Path("/a"), target=Path("/b"))
    with pytest.raises(ValidationError):
        spec.target = Path("/c")  # type: ignore[misc]


def test_rejects_extra_fields():
    with pytest.raises(ValidationError):
        LinkSpec(source=Path("/a"), target=Path("/b"), mode="copy")  # type: ignore[call-arg]
