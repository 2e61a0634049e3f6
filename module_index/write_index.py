"""Logic for writing the generated index to disk."""

from pathlib import Path


def write_index(dest: Path, text: str) -> None:
    """Write ``text`` to ``dest``, creating parent directories as needed."""
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(text, encoding="utf-8")
    except OSError as e:
        msg = f'Unable to create "{dest}" file ({e}).'
        raise SystemExit(msg) from e
