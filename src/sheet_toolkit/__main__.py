"""Allow ``python -m sheet_toolkit``."""

from sheet_toolkit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
