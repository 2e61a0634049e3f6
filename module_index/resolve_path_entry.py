"""Logic for deriving the module name and import reference of a path."""

import os
import posixpath

from module_index.path_policy import PathPolicy
from module_index.resolved_path_entry import ResolvedPathEntry

RELATIVE_SEGMENTS = frozenset({"", ".", ".."})


def unixify_path(path: str) -> str:
    """Convert host separators to forward slashes."""
    if os.sep != "/":
        return path.replace(os.sep, "/")
    return path


def resolve_path_entry(path: str, policy: PathPolicy) -> ResolvedPathEntry:
    """Resolve a relative file path into segments, name and reference."""
    normalized = unixify_path(os.path.normpath(path))
    directory, file_name = posixpath.split(normalized)
    stem, _ext = posixpath.splitext(file_name)

    module_name = file_name if policy.keep_extension else stem
    if not directory:
        relative = module_name
    else:
        relative = f"{directory}/{module_name}"

    segments = tuple(s for s in directory.split("/") if s not in RELATIVE_SEGMENTS)
    return ResolvedPathEntry(
        segments=segments,
        module_name=module_name,
        import_reference=policy.path_prefix + relative,
    )
