"""
Pet Registry CLI - Command-line interface.

Serve the registry over HTTP and inspect persisted snapshots.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pet_registry.config import RegistrySettings
from pet_registry.core.exceptions import ConfigurationError, format_exception
from pet_registry.registry.storage import RegistrySnapshot, load_snapshot

app = typer.Typer(
    name="pet-registry",
    help="Pet Registry - one pet per owner, administrator-gated deletion",
    no_args_is_help=True,
)
console = Console()


def _read_snapshot(state_file: Path) -> RegistrySnapshot:
    """Load a snapshot or exit with an error message."""
    try:
        snapshot = load_snapshot(state_file)
    except ConfigurationError as e:
        console.print(f"[red]{escape(format_exception(e))}[/red]")
        raise typer.Exit(1)

    if snapshot is None:
        console.print(f"[red]Snapshot does not exist: {state_file}[/red]")
        raise typer.Exit(1)
    return snapshot


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    log_level: str = typer.Option("info", "--log-level", help="Uvicorn log level"),
):
    """Run the HTTP API (configured via PET_REGISTRY_* variables)."""
    import uvicorn

    from pet_registry.api.app import create_app

    try:
        settings = RegistrySettings.from_env()
    except ConfigurationError as e:
        console.print(f"[red]{escape(format_exception(e))}[/red]")
        raise typer.Exit(1)

    console.print(
        Panel.fit(
            f"[bold blue]Pet Registry[/bold blue]\n"
            f"Administrator: {escape(settings.administrator)}\n"
            f"Snapshot: {settings.state_file or 'in memory'}\n"
            f"Listening: http://{host}:{port}",
        )
    )
    uvicorn.run(create_app(settings=settings), host=host, port=port, log_level=log_level)


@app.command()
def show(
    identity: str = typer.Argument(..., help="Owner identity to look up"),
    state_file: Path = typer.Option(..., "--state-file", "-s", help="Registry snapshot"),
):
    """Show the pet registered to an identity."""
    snapshot = _read_snapshot(state_file)
    record = snapshot.records.get(identity)

    if record is None:
        console.print(f"[yellow]{escape(identity)} has no registered pet[/yellow]")
        raise typer.Exit(1)

    table = Table(title=f"Pet of {escape(identity)}")
    table.add_column("Name", style="cyan")
    table.add_column("Age", justify="right")
    table.add_column("Vaccinated")

    vaccinated = "[green]yes[/green]" if record.vaccinated else "[red]no[/red]"
    table.add_row(escape(record.name), str(record.age), vaccinated)
    console.print(table)


@app.command()
def admin(
    state_file: Path = typer.Option(..., "--state-file", "-s", help="Registry snapshot"),
):
    """Show the administrator recorded in a snapshot."""
    snapshot = _read_snapshot(state_file)
    console.print(f"Administrator: {escape(snapshot.administrator)}")
    console.print(f"[dim]Last updated: {snapshot.updated_at}[/dim]")


@app.command()
def version():
    """Show Pet Registry version."""
    from pet_registry import __version__

    console.print(f"Pet Registry v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
