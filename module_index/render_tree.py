"""Logic for serializing a namespace tree into one of the output dialects."""

from module_index.dialect import DIALECTS, Dialect
from module_index.namespace_tree import Alias, Namespace
from module_index.path_policy import PathPolicy


def render_tree(tree: Namespace, policy: PathPolicy) -> str:
    """Render the children of ``tree`` as the body of an index file."""
    dialect = DIALECTS[policy.output_format]
    return _render_children(tree, dialect, policy.indent_unit, 1)


def _render_children(
    namespace: Namespace, dialect: Dialect, indent_unit: str, depth: int
) -> str:
    """Recursively render the entries of one namespace at ``depth``."""
    pad = indent_unit * depth
    entries: list[str] = []
    for name, node in namespace.children.items():
        if isinstance(node, Alias):
            leaf = dialect.alias.format(name=name, reference=node.reference)
            entries.append(pad + leaf)
            continue

        text = pad + dialect.namespace_open.format(name=name) + "\n"
        text += _render_children(node, dialect, indent_unit, depth + 1)
        if dialect.namespace_close is not None:
            text += "\n" + pad + dialect.namespace_close
        entries.append(text)
    return dialect.separator.join(entries)
