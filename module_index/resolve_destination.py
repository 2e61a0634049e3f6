"""Utility for determining where the generated index is written."""

import os
from pathlib import Path

from module_index.path_policy import PathPolicy


def resolve_destination(dest: str | Path | None, policy: PathPolicy) -> Path:
    """Return the index file path for ``dest``.

    No destination means ``index.<ext>`` in the working directory; an
    existing directory receives ``index.<ext>`` inside it.
    """
    file_name = f"index.{policy.output_format.value}"
    if not dest:
        return Path(file_name)
    if os.path.isdir(dest):
        return Path(os.path.normpath(os.path.join(dest, file_name)))
    return Path(os.path.normpath(dest))
