"""Logic for turning a sequence of file paths into a namespace tree."""

from collections.abc import Iterable

from module_index.namespace_tree import Namespace
from module_index.path_policy import PathPolicy
from module_index.resolve_path_entry import resolve_path_entry


def build_tree(paths: Iterable[str], policy: PathPolicy) -> Namespace:
    """Build the namespace tree for ``paths``.

    Paths are inserted in the order given; no sorting happens here, so the
    caller must pass them pre-sorted for reproducible output.

    Flattened or omitted directories never create a namespace. Their files
    rise to the closest kept ancestor and any deeper directories continue
    from there.
    """
    root = Namespace()
    for path in paths:
        entry = resolve_path_entry(path, policy)
        cursor = root
        total = len(entry.segments)
        if total == 0:
            cursor.bind(entry.module_name, entry.import_reference)
            continue

        for i, segment in enumerate(entry.segments):
            is_last = i + 1 == total
            if policy.flatten or segment in policy.omitted_segments:
                if is_last:
                    cursor.bind(entry.module_name, entry.import_reference)
                continue

            cursor = cursor.child_namespace(segment)
            if is_last:
                cursor.bind(entry.module_name, entry.import_reference)
    return root
