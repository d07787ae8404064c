"""Build the home-directory LinkSpecs from configuration."""

from pathlib import Path

from ...utils.normalize_path import normalize_path
from ..config.DotsConfig import DotsConfig
from .LinkSpec import LinkSpec


def home_dir() -> Path:
    return normalize_path("~")


def collect_link_specs(config: DotsConfig) -> list[LinkSpec]:
    """List the links for the home directory, in the order they are applied.

    1. Every entry named ``.*`` in the home source dir -> ``~/<name>``
    2. Every directory in the config source dir -> ``~/.config/<name>`` (when configured)
    3. Explicit ``link.extra`` entries

    Missing source directories contribute nothing.
    """
    home = home_dir()
    specs: list[LinkSpec] = []

    home_source = config.source_path(config.link.home_dir)
    if home_source.is_dir():
        for entry in sorted(home_source.iterdir()):
            if entry.name.startswith("."):
                specs.append(LinkSpec(source=entry, target=home / entry.name))

    if config.link.config_dir is not None:
        config_source = config.source_path(config.link.config_dir)
        if config_source.is_dir():
            for entry in sorted(p for p in config_source.iterdir() if p.is_dir()):
                specs.append(LinkSpec(source=entry, target=home / ".config" / entry.name))

    for extra in config.link.extra:
        specs.append(LinkSpec(source=config.source_path(extra.source), target=normalize_path(extra.target)))

    return specs
