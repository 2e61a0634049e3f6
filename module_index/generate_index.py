"""Driver composing path collection, rendering and writing for one target."""

import logging
from collections.abc import Iterable
from pathlib import Path

from module_index.collect_paths import collect_paths
from module_index.path_policy import PathPolicy
from module_index.render_index_file import render_index_file
from module_index.resolve_destination import resolve_destination
from module_index.write_index import write_index

logger = logging.getLogger(__name__)


def generate_index(
    sources: Iterable[str | Path], dest: str | Path | None, policy: PathPolicy
) -> Path:
    """Generate the index file for ``sources`` and return where it was written."""
    out_file = resolve_destination(dest, policy)
    logger.debug("Generating %s (%s)", out_file, policy.output_format.value)

    # a previous run may have left the index inside a walked source
    paths = [p for p in collect_paths(sources, out_file.parent) if p != out_file.name]
    write_index(out_file, render_index_file(paths, policy))
    return out_file
