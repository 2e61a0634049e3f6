"""Data models for the namespace tree built from file paths.

A tree is a root ``Namespace`` (empty name) whose children map names to
either nested ``Namespace`` nodes or ``Alias`` leaves. Children keep their
first-insertion order, which is the order they are rendered in.

A name must not be bound to both an ``Alias`` and a ``Namespace`` within the
same parent. Callers are responsible for feeding path sets that respect
this; the tree does not check it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Alias:
    """Leaf binding a module name to the reference it is required from."""

    name: str
    reference: str


@dataclass
class Namespace:
    """Internal node grouping named children."""

    name: str = ""
    children: dict[str, Namespace | Alias] = field(default_factory=dict)

    def child_namespace(self, name: str) -> Namespace:
        """Return the child namespace called ``name``, creating it if missing."""
        child = self.children.get(name)
        if child is None:
            child = Namespace(name)
            self.children[name] = child
        return child  # type: ignore[return-value]

    def bind(self, name: str, reference: str) -> None:
        """Bind ``name`` to ``reference`` as an alias in this namespace."""
        self.children[name] = Alias(name, reference)

    def iter_aliases(
        self, prefix: tuple[str, ...] = ()
    ) -> Iterator[tuple[tuple[str, ...], str]]:
        """Yield ``(path, reference)`` for every alias below this node."""
        for name, child in self.children.items():
            if isinstance(child, Alias):
                yield (*prefix, name), child.reference
            else:
                yield from child.iter_aliases((*prefix, name))
