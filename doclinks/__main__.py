"""Entry point for ``python -m doclinks``."""

from doclinks.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
