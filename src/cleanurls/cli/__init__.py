"""Command-line interface for cleanurls."""

from cleanurls.cli.main import app

__all__ = ["app", "main"]


def main() -> None:
    """Entry point for the CLI."""
    app()
