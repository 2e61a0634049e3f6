"""Entry point for generating a module index from the repository root."""

from module_index.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
