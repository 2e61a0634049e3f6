"""Logic for turning a raw options mapping into a PathPolicy."""

from typing import Any

from module_index.deep_merge import deep_merge
from module_index.load_config import DEFAULT_OPTIONS
from module_index.output_format import OutputFormat
from module_index.path_policy import PathPolicy


def policy_from_options(options: dict[str, Any]) -> PathPolicy:
    """Build a PathPolicy from option keys, filling gaps with defaults.

    Keys left empty in YAML arrive as ``None`` and fall back to their
    defaults. An empty ``indentTab`` string is kept as given.
    """
    merged = deep_merge(DEFAULT_OPTIONS, options)

    fmt = merged["format"] or DEFAULT_OPTIONS["format"]
    try:
        output_format = OutputFormat(fmt)
    except ValueError:
        allowed = ", ".join(f.value for f in OutputFormat)
        msg = f"Unknown format {fmt!r} (expected one of: {allowed})"
        raise SystemExit(msg) from None

    omit_dirs = merged["omitDirs"] or []
    # omitDirs must be a list
    if isinstance(omit_dirs, str):
        omit_dirs = [omit_dirs]

    indent_unit = merged["indentTab"]
    if indent_unit is None:
        indent_unit = DEFAULT_OPTIONS["indentTab"]

    return PathPolicy(
        keep_extension=bool(merged["requireWithExtension"]),
        path_prefix=merged["pathPrefix"] or "",
        omitted_segments=frozenset(omit_dirs),
        flatten=bool(merged["flatIndex"]),
        indent_unit=indent_unit,
        output_format=output_format,
        notice=merged["notice"],
    )
