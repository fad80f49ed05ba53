"""Allow ``python -m panchanga`` to invoke the CLI."""

from __future__ import annotations

from .cli import app

if __name__ == "__main__":  # pragma: no cover - exercised through the console script
    app()
