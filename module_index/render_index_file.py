"""Logic for assembling the full text of a generated index file."""

from collections.abc import Iterable

from module_index.build_tree import build_tree
from module_index.dialect import DIALECTS
from module_index.path_policy import PathPolicy
from module_index.render_tree import render_tree

NOTICE = "This file was auto-generated by module-index, DO NOT edit it directly"


def render_index_file(paths: Iterable[str], policy: PathPolicy) -> str:
    """Build and render the index for ``paths``, wrapped with header and footer."""
    dialect = DIALECTS[policy.output_format]
    header = [f"{dialect.comment}! {NOTICE}"]
    if policy.notice:
        header.append(f"{dialect.comment}! {policy.notice}")

    body = render_tree(build_tree(paths, policy), policy)
    if body:
        body += dialect.body_end
    return "\n".join(header) + "\n" + dialect.prologue + body + dialect.epilogue
