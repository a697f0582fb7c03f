"""Main entry script for checking an R project tree against its conventions."""

from projcheck.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
