"""Orchestration logic for generating every configured module index."""

import argparse
import logging
from typing import Any

from module_index.deep_merge import deep_merge
from module_index.generate_index import generate_index
from module_index.load_config import load_config
from module_index.policy_from_options import policy_from_options

logger = logging.getLogger(__name__)

# argparse dest -> option key
CLI_OPTION_KEYS = {
    "format": "format",
    "require_with_extension": "requireWithExtension",
    "path_prefix": "pathPrefix",
    "omit_dirs": "omitDirs",
    "indent_tab": "indentTab",
    "flat_index": "flatIndex",
    "notice": "notice",
}


def run_generation(args: argparse.Namespace) -> int:
    """Generate the index file of every target."""
    config = load_config(args.config)
    cli_options = _cli_overrides(args)

    targets = _targets(args, config)
    if not targets:
        msg = "No sources given and no targets found in the configuration"
        raise SystemExit(msg)

    for target in targets:
        options = deep_merge(config["options"] or {}, target.get("options") or {})
        options = deep_merge(options, cli_options)
        policy = policy_from_options(options)

        sources = target.get("src") or []
        if isinstance(sources, str):
            sources = [sources]

        dest = generate_index(sources, target.get("dest"), policy)
        print(f'Module index "{dest}" created')
    return 0


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the options actually passed on the command line."""
    overrides: dict[str, Any] = {}
    for attr, key in CLI_OPTION_KEYS.items():
        value = getattr(args, attr, None)
        if value is not None:
            overrides[key] = value
    return overrides


def _targets(args: argparse.Namespace, config: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the command line target, or the configured ones."""
    if args.sources:
        return [{"src": args.sources, "dest": args.dest}]
    if args.dest:
        msg = "--dest needs sources on the command line"
        raise SystemExit(msg)
    return list(config.get("targets") or [])
