"""Generate an index file re-exporting every module under a directory tree.

The index mirrors the directory layout as nested objects, so consumers can
``require`` a whole library through one entry point. Output is either
JavaScript or CoffeeScript.
"""

import argparse
import logging

from module_index.output_format import OutputFormat
from module_index.run_generation import run_generation


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    ap = argparse.ArgumentParser(
        description="Auto-build a module index file from a directory tree.",
    )
    ap.add_argument(
        "sources",
        nargs="*",
        help="Directories or files to index (default: targets from --config)",
    )
    ap.add_argument(
        "-o",
        "--dest",
        help="Index file or directory to write (default: ./index.<format>)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        help="Output dialect (default: js)",
    )
    ap.add_argument(
        "--require-with-extension",
        action=argparse.BooleanOptionalAction,
        help="Keep file extensions in module names and require paths",
    )
    ap.add_argument(
        "--path-prefix",
        help="String prepended to every require path, e.g. ./lib/",
    )
    ap.add_argument(
        "--omit-dir",
        dest="omit_dirs",
        action="append",
        help="Directory name to elide from the tree (repeatable)",
    )
    ap.add_argument(
        "--indent-tab",
        help="Indentation unit (default: two spaces)",
    )
    ap.add_argument(
        "--flat-index",
        action=argparse.BooleanOptionalAction,
        help="Place every module at the top level",
    )
    ap.add_argument(
        "--notice",
        help="Extra line added to the generated header comment",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the index generation."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
