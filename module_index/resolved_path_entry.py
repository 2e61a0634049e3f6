"""Data model for a file path resolved against the path policy."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedPathEntry:
    """Represents one input path, ready to be placed in the tree."""

    segments: tuple[str, ...]  # directory parts, without "", "." and ".."
    module_name: str
    import_reference: str  # e.g. ./lib/foo/bar
