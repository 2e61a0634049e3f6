"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from module_index.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS: dict[str, Any] = {
    "format": "js",
    "requireWithExtension": False,
    "pathPrefix": "",
    "omitDirs": [],
    "indentTab": "  ",
    "flatIndex": False,
    "notice": None,
}

DEFAULT_CONFIG: dict[str, Any] = {
    "options": DEFAULT_OPTIONS,
    "targets": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", path)
    return config
