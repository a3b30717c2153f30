"""Module entry point for `python -m record_jsonschema`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
