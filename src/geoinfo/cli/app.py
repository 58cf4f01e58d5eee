"""Main CLI application."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from geoinfo import __version__

if TYPE_CHECKING:
    from geoinfo.core.models.config import Config

# Create main app
app = typer.Typer(
    name="geoinfo",
    help="IP address geolocation service",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Config file (YAML or JSON)"),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]geoinfo[/bold blue] v{__version__}")
        raise typer.Exit()


def load_config(path: Path | None) -> Config:
    """Load config from file, or defaults and environment."""
    import yaml

    from geoinfo.core.models.config import Config

    try:
        return Config.from_file(path) if path else Config()
    except (FileNotFoundError, ValidationError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        raise typer.Exit(1) from e


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """geoinfo - resolve IP addresses to locations."""
    pass


@app.command()
def lookup(
    ip: Annotated[str, typer.Argument(help="IPv4 or IPv6 address")],
    config: ConfigOption = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print JSON instead of a table"),
    ] = False,
) -> None:
    """Look up the location of a single address."""
    from geoinfo.core.context import AppContext
    from geoinfo.core.errors import LocationLookupError
    from geoinfo.core.logging import configure_logging

    cfg = load_config(config)
    # stdout carries the result only
    configure_logging(cfg.log.level, cfg.log.structured, stream=sys.stderr)
    try:
        context = AppContext.open(cfg)
    except (FileNotFoundError, LocationLookupError) as e:
        console.print(f"[red]Cannot open database: {e}[/red]")
        raise typer.Exit(1) from e

    with context:
        try:
            info = context.resolver.locate(ip)
        except LocationLookupError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1) from e

    if as_json:
        console.print_json(data=info.to_dict())
        return

    table = Table(title=f"Location of {info.ip}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Country", info.country)
    table.add_row("City", info.city)
    table.add_row("Latitude", str(info.latitude))
    table.add_row("Longitude", str(info.longitude))
    table.add_row("Time zone", info.time_zone)
    table.add_row("Language", info.language)
    table.add_row("Local time", info.local_time())
    table.add_row("UTC time", info.utc_time)
    console.print(table)


@app.command()
def config(
    action: Annotated[
        str,
        typer.Argument(help="Action: show, validate, init"),
    ],
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Config file"),
    ] = None,
) -> None:
    """Manage configuration."""
    if action == "show":
        cfg = load_config(file if file and file.exists() else None)
        console.print("[bold]Current Configuration:[/bold]")
        console.print_json(data=cfg.to_dict())

    elif action == "validate":
        if file is None:
            console.print("[red]--file is required for validate[/red]")
            raise typer.Exit(1)
        load_config(file)
        console.print(f"[green]Config file {file} is valid![/green]")

    elif action == "init":
        from geoinfo.core.models.config import Config

        output_path = file or Path("./config/default.yaml")
        Config().to_yaml(output_path)
        console.print(f"[green]Config initialized at {output_path}[/green]")

    else:
        console.print(f"[red]Unknown action: {action}[/red]")
        raise typer.Exit(2)


@app.command()
def serve(
    config: ConfigOption = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on (overrides config)"),
    ] = None,
    host: Annotated[
        str | None,
        typer.Option("--host", "-h", help="Host to bind to (overrides config)"),
    ] = None,
) -> None:
    """Start the HTTP service."""
    import uvicorn

    from geoinfo.api.app import CONFIG_ENV_VAR

    cfg = load_config(config)
    if config is not None:
        os.environ[CONFIG_ENV_VAR] = str(config.resolve())

    bind_host = host or cfg.host
    bind_port = port or cfg.port

    console.print("[bold green]Starting geoinfo[/bold green]")
    console.print(f"  Host: {bind_host}")
    console.print(f"  Port: {bind_port}")
    console.print(f"  Database: {cfg.db.path}")
    console.print()

    uvicorn.run(
        "geoinfo.api:create_app_from_env",
        host=bind_host,
        port=bind_port,
        log_level=cfg.log.level.lower(),
        factory=True,
        timeout_graceful_shutdown=30,
    )


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
