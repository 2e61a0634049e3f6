"""Supported output dialects for the generated index file."""

from enum import Enum


class OutputFormat(Enum):
    """Output dialect; the value doubles as the default file extension."""

    COFFEE = "coffee"
    JS = "js"
