"""CLI entry point for streaming-xml.

Allows ``python -m streaming_xml.cli_main``; the installed console script
points at :data:`streaming_xml.cli.app` directly.
"""

from __future__ import annotations

from .cli import app

__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
