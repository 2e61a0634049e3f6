"""Data model for the per-run path handling policy."""

from dataclasses import dataclass, field

from module_index.output_format import OutputFormat


@dataclass(frozen=True)
class PathPolicy:
    """Controls how file paths become tree nodes and how the tree is printed."""

    keep_extension: bool = False
    path_prefix: str = ""
    omitted_segments: frozenset[str] = field(default_factory=frozenset)
    flatten: bool = False
    indent_unit: str = "  "
    output_format: OutputFormat = OutputFormat.JS
    notice: str | None = None
