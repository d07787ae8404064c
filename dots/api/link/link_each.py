"""Link a batch of specs while reporting progress."""

from collections.abc import Iterator
from typing import Any

from .Linker import Linker
from .LinkSpec import LinkSpec
from .LinkState import LinkState


def link_each(
    linker: Linker,
    specs: list[LinkSpec],
    links: list[dict[str, Any]],
    backups: list[str],
    start: float = 0.0,
    end: float = 1.0,
) -> Iterator[tuple[float, str]]:
    """Apply ``linker.ensure_link`` to each spec in order, yielding progress.

    ``links`` and ``backups`` are filled as specs complete, so a caller that
    catches the first ``OSError`` still knows what was done before it.
    """
    total = max(len(specs), 1)
    for index, spec in enumerate(specs):
        yield (start + (end - start) * index / total, f"Linking {spec.target}...")
        previous = linker.inspect(spec)
        linker.ensure_link(spec)
        links.append({"source": str(spec.source), "target": str(spec.target), "previous": previous.value})
        if previous is LinkState.FILE:
            backups.append(str(spec.backup))
