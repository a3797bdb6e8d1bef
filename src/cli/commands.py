"""CLI commands for trip voting."""
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from src.config import settings
from src.engine.aggregator import AggregateResult
from src.engine.catalog import load_catalog
from src.engine.errors import RankingValidationError, StoreIOError
from src.engine.service import VotingService
from src.storage.factory import build_record_store

votes_app = typer.Typer(help="Voting commands")
console = Console()


def _build_service() -> VotingService:
    return VotingService(catalog=load_catalog(), store=build_record_store(settings))


def _print_aggregate(result: AggregateResult, limit: Optional[int] = None) -> None:
    table = Table(title=f"Aggregate ranking ({result.total_votes} vote(s))")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Trip", style="cyan", no_wrap=True)
    table.add_column("Score", justify="right", style="green")
    table.add_column("Appearances", justify="right", style="yellow")

    standings = result.standings[:limit] if limit else result.standings
    for position, standing in enumerate(standings, start=1):
        table.add_row(
            str(position),
            standing.name,
            str(standing.score),
            str(standing.appearances),
        )

    console.print(table)


@votes_app.command("options")
def list_options():
    """List the trips that can be ranked."""
    catalog = load_catalog()
    console.print(f"[bold cyan]Trip options[/bold cyan] ({len(catalog)})")
    for name in catalog:
        console.print(f"  • {name}")


@votes_app.command("cast")
def cast_vote(
    ranking: list[str] = typer.Argument(..., help="Trips in order of preference, favourite first"),
):
    """Record a ranking and show the updated leaderboard.

    Examples:
        trip-vote votes cast Lisbon Nice Vienna
        trip-vote votes cast "New Forest" Galway
    """
    service = _build_service()
    try:
        result = service.submit(ranking)
    except RankingValidationError as e:
        console.print("[red]Invalid ranking:[/red]")
        for error in e.errors:
            console.print(f"  [red]✗[/red] {error}")
        raise typer.Exit(1)
    except StoreIOError as e:
        console.print(f"[red]Storage error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Recorded ranking of [bold]{len(ranking)}[/bold] trip(s)")
    _print_aggregate(result)


@votes_app.command("results")
def show_results(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Show only the top N trips"),
):
    """Show the aggregate ranking over every stored vote."""
    service = _build_service()
    try:
        result = service.get_aggregate()
    except StoreIOError as e:
        console.print(f"[red]Storage error:[/red] {e}")
        raise typer.Exit(1)

    _print_aggregate(result, limit=limit)
