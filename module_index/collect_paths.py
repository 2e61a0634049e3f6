"""Logic for gathering the file paths that make up an index."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def collect_paths(sources: Iterable[str | Path], dest_dir: str | Path) -> list[str]:
    """Collect file paths under ``sources``, relative to ``dest_dir``.

    Directories are walked top-down: at every level the sorted file names
    come first, then the sorted sub-directories are recursed into. Hidden
    files and directories are skipped. Missing sources are logged and
    skipped.
    """
    base = os.fspath(dest_dir) or "."
    paths: list[str] = []
    for entry in sources:
        source = os.fspath(entry)
        if not os.path.exists(source):
            logger.error("File %s missing!", source)
            continue

        if os.path.isdir(source):
            paths.extend(os.path.relpath(p, base) for p in _walk_sorted(source))
        else:
            paths.append(os.path.relpath(source, base))

    logger.debug("Collected %d paths relative to %s", len(paths), base)
    return paths


def _walk_sorted(root: str) -> list[str]:
    """List non-hidden files under ``root`` in deterministic order."""
    found: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # pruning in place controls both what and in which order os.walk recurses
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        found.extend(
            os.path.join(dirpath, name)
            for name in sorted(filenames)
            if not name.startswith(".")
        )
    return found
