"""Main Typer application for cleanurls."""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cleanurls.cli.errorhandler import handle_cli_errors
from cleanurls.config import create_default_config, find_site_config
from cleanurls.logging_setup import configure_logging
from cleanurls.site import OutputEntry, build_output_plan, read_site

app = typer.Typer(
    name="cleanurls",
    help="Plan extensionless URLs and .html destinations for a static site",
    add_completion=False,
)

console = Console()


class ServerKind(str, Enum):
    NGINX = "nginx"
    APACHE = "apache"


SERVER_SNIPPETS = {
    ServerKind.NGINX: """\
location / {
    try_files $uri $uri/ $uri.html =404;
}
""",
    ServerKind.APACHE: """\
RewriteEngine On
RewriteCond %{REQUEST_FILENAME} !-d
RewriteCond %{REQUEST_FILENAME}.html -f
RewriteRule ^(.*)$ $1.html [L]
""",
}


@app.callback()
def main(
    log_level: Annotated[
        str, typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    ] = "INFO",
) -> None:
    """Configure logging for every command."""
    configure_logging(log_level)


def _source_label(entry: OutputEntry) -> str:
    doc = entry.document
    label = doc.relative_path or doc.name
    if doc.pager is not None and doc.pager.page > 1:
        return f"{label} (page {doc.pager.page})"
    return label


@app.command()
def plan(
    site_root: Annotated[Path, typer.Argument(help="Site root containing _config.toml")] = Path(),
    *,
    dest: Annotated[
        str | None, typer.Option("--dest", help="Destination root (defaults to the configured destination)")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the plan as JSON")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks")] = False,
) -> None:
    """Show where every page, post and document is written and linked."""
    with handle_cli_errors(debug=debug):
        site = read_site(site_root.resolve())
        entries = build_output_plan(site, dest)

    if as_json:
        rows = [
            {
                "source": _source_label(entry),
                "kind": entry.document.kind.value,
                "destination": entry.destination,
                "url": entry.url,
            }
            for entry in entries
        ]
        typer.echo(json.dumps(rows, indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Output plan ({len(entries)} files)", show_header=True, header_style="bold magenta")
    table.add_column("Source", style="cyan")
    table.add_column("Kind", style="dim")
    table.add_column("Destination", style="green")
    table.add_column("URL", style="yellow")
    for entry in entries:
        table.add_row(_source_label(entry), entry.document.kind.value, entry.destination, entry.url)
    console.print(table)


@app.command()
def init(
    site_root: Annotated[Path, typer.Argument(help="Site root to write _config.toml into")] = Path(),
    *,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing configuration")] = False,
) -> None:
    """Write a default _config.toml."""
    site_root = site_root.resolve()
    existing = find_site_config(site_root)
    if existing is not None and not force:
        console.print(
            Panel(
                f"[bold yellow]Configuration already exists at {existing}[/bold yellow]\n\n"
                "Edit it by hand or pass [cyan]--force[/cyan] to overwrite.",
                title="Config Exists",
                border_style="yellow",
            )
        )
        raise typer.Exit(1)

    with handle_cli_errors():
        create_default_config(site_root)
    console.print(f"[bold green]Wrote[/bold green] {site_root / '_config.toml'}")


@app.command("server-config")
def server_config(
    server: Annotated[ServerKind, typer.Option("--server", help="Web server to print a snippet for")] = ServerKind.NGINX,
) -> None:
    """Print the web server rule that serves /path from /path.html."""
    typer.echo(SERVER_SNIPPETS[server], nl=False)
