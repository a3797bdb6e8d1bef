"""Main CLI application entry point."""
import typer
from rich.console import Console

from src.cli import commands
from src.config import settings

app = typer.Typer(
    name="trip-vote",
    help="Ranked voting over a fixed set of trip options",
    add_completion=False,
)

# Add command groups
app.add_typer(commands.votes_app, name="votes", help="Cast votes and view results")

console = Console()


@app.command()
def serve(
    host: str = typer.Option(settings.host, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API."""
    import uvicorn

    console.print(f"[bold cyan]Trip Vote API[/bold cyan] on [yellow]http://{host}:{port}[/yellow]")
    uvicorn.run(
        "src.web.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def version():
    """Show version information."""
    console.print("trip-vote version 0.1.0")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
