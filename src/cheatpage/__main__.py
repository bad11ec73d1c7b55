"""Entry point for running with python -m cheatpage."""

from cheatpage.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
