"""
Talent Intake Command Line Interface

Provides CLI commands for managing the candidate store, including database
setup and adding candidates from JSON payload files.
"""

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from talent_intake.errors import TalentIntakeError
from talent_intake.utils.logger import setup_logging

app = typer.Typer(
    name="talent-intake",
    help="Candidate intake backend CLI",
    add_completion=False,
)
console = Console()


@app.callback()
def main() -> None:
    """Initialize logging before any command runs."""
    setup_logging()


@app.command()
def version():
    """Show application version."""
    from talent_intake import __app_name__, __version__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show configuration."""
    from talent_intake.utils.config import get_settings

    settings = get_settings()

    table = Table(title="Talent Intake Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Database Host", settings.database.host)
    table.add_row("Database Port", str(settings.database.port))
    table.add_row("Database Name", settings.database.name)
    table.add_row("Log Level", settings.logging.level)
    table.add_row("Log File", str(settings.logging.file_path))

    console.print(table)


@app.command()
def init_db():
    """Check the database connection and create the required indexes."""
    from talent_intake.data.database import get_database_manager

    console.print("[yellow]Initializing database...[/yellow]")
    db_manager = get_database_manager()

    async def _init() -> bool:
        try:
            if not await db_manager.check_connection():
                return False
            await db_manager.ensure_indexes()
            return True
        finally:
            db_manager.close()

    console.print("  Checking database connection...")
    if not asyncio.run(_init()):
        console.print("[red]Error: Could not connect to MongoDB.[/red]")
        console.print("[dim]Make sure MongoDB is running and connection settings are correct.[/dim]")
        raise typer.Exit(1)

    console.print("  [green]✓[/green] Connected to MongoDB")
    console.print("  [green]✓[/green] Indexes created")
    console.print("\n[green]Database initialized successfully![/green]")


@app.command()
def add(
    payload_file: Path = typer.Argument(..., help="JSON file with the candidate payload"),
):
    """Validate and store a candidate described in a JSON file."""
    from talent_intake.data.store import get_store_client
    from talent_intake.services import add_candidate

    if not payload_file.exists():
        console.print(f"[red]Error: File does not exist: {payload_file}[/red]")
        raise typer.Exit(1)

    try:
        payload = json.loads(payload_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON in {payload_file.name}: {e}[/red]")
        raise typer.Exit(1)

    client = get_store_client()

    async def _add() -> dict:
        try:
            return await add_candidate(payload, client)
        finally:
            await client.disconnect()

    try:
        record = asyncio.run(_add())
    except TalentIntakeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Candidate {record['id']} added[/green]")
    _print_record(record)


@app.command()
def show(candidate_id: int = typer.Argument(..., help="Candidate id")):
    """Show a stored candidate."""
    from talent_intake.data.store import get_store_client
    from talent_intake.services import get_candidate

    client = get_store_client()

    async def _show():
        try:
            return await get_candidate(candidate_id, client)
        finally:
            await client.disconnect()

    try:
        candidate = asyncio.run(_show())
    except TalentIntakeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    _print_record(candidate.model_dump(exclude=set(candidate.relation_fields)))


def _print_record(record: dict) -> None:
    table = Table(show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field, value in record.items():
        table.add_row(field, "" if value is None else str(value))
    console.print(table)


if __name__ == "__main__":
    app()
