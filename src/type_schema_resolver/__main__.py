"""Module entry point for `python -m type_schema_resolver`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
