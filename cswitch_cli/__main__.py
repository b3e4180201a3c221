"""console script entrypoint for the cargo-switch CLI."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
