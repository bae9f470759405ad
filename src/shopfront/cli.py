"""Command-line entry point: serve the API and manage its database."""

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel

from src.shopfront.core.services import DbSessionService
from src.shopfront.runtime.context import get_config

console = Console()

app = typer.Typer(
    name="shopfront",
    help="Shopfront API - users and products over HTTP",
    rich_markup_mode="rich",
)

APP_IMPORT_PATH = "src.shopfront.api.http.app:app"


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind (default: config app.host)"),
    port: int | None = typer.Option(
        None, help="Port to bind (default: API_PORT, else 8080)"
    ),
) -> None:
    """
    🚀 Start the HTTP server.

    Exits with code 1 when the port cannot be bound.
    """
    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting Shopfront API on {host}:{port}[/bold green]",
            border_style="green",
        )
    )

    server = uvicorn.Server(
        uvicorn.Config(APP_IMPORT_PATH, host=host, port=port, log_config=None)
    )
    # uvicorn exits the process with code 1 itself on bind errors
    server.run()

    if not server.started:
        console.print(f"[red]Server failed to start on {host}:{port}[/red]")
        raise typer.Exit(1)


@app.command(name="init-db")
def init_db() -> None:
    """Create all database tables."""
    config = get_config()
    database_service = DbSessionService(config)
    try:
        database_service.create_all()
    finally:
        database_service.dispose()
    console.print(f"[green]Tables created in {config.database.url}[/green]")


if __name__ == "__main__":
    app()
