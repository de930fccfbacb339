"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from cleanurls.config.exceptions import ConfigError, ConfigValidationError
from cleanurls.site.exceptions import SiteError

console = Console()


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise with the full traceback. If False, print a
            user-friendly error and exit with status 1.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except ConfigValidationError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Configuration:[/bold red] {e}")
        for error in e.errors:
            loc = " -> ".join(str(part) for part in error.get("loc", ()))
            console.print(f"  - {loc}: {error.get('msg', '')}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except SiteError as e:
        if debug:
            raise
        console.print(f"[bold red]Source Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
