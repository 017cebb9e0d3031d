"""CLI entry point for Podexplorer."""

import asyncio
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from podexplorer.catalog.client import CatalogClient
from podexplorer.catalog.derive import episode_summary, label_genre_ids
from podexplorer.catalog.genres import load_genres
from podexplorer.catalog.listing import ListingOptions, SortOrder
from podexplorer.config.logging import setup_logging
from podexplorer.config.manager import ConfigManager
from podexplorer.config.schema import GlobalConfig
from podexplorer.utils.display import format_updated, truncate_text
from podexplorer.utils.errors import ConfigError, PodExplorerError
from podexplorer.views.catalog_view import CatalogView
from podexplorer.views.detail_view import ShowDetailView

app = typer.Typer(
    name="podexplorer",
    help="Browse podcast shows, seasons and episodes from the remote catalog",
    no_args_is_help=True,
)
console = Console()


@dataclass
class CLIState:
    """Global options shared by all commands."""

    verbose: bool = False
    log_file: Path | None = None


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """Podexplorer - browse podcasts from the terminal."""
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = CLIState(verbose=verbose, log_file=log_file)


def _load_settings(ctx: typer.Context) -> GlobalConfig:
    """Load config and apply its log level."""
    config = ConfigManager().load_config()
    state: CLIState = ctx.obj or CLIState()
    setup_logging(verbose=state.verbose, log_file=state.log_file, level=config.log_level)
    return config


def _spinner() -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    )


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podexplorer import __version__

    console.print(f"[bold cyan]Podexplorer[/bold cyan] v{__version__}")


@app.command("shows")
def list_shows(
    ctx: typer.Context,
    search: Annotated[str, typer.Option("--search", "-s", help="Filter by title")] = "",
    genre: Annotated[
        int | None, typer.Option("--genre", "-g", help="Only shows with this genre id")
    ] = None,
    sort: Annotated[
        SortOrder | None, typer.Option("--sort", help="Sort order (default from config)")
    ] = None,
    page: Annotated[int, typer.Option("--page", "-p", help="Page number", min=1)] = 1,
    page_size: Annotated[
        int | None, typer.Option("--page-size", help="Shows per page", min=1)
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List podcast shows from the catalog.

    Examples:
        podexplorer shows --search history

        podexplorer shows --genre 4 --sort title-asc --page 2
    """

    async def run_listing() -> None:
        try:
            config = _load_settings(ctx)
            genres = load_genres(config.genres_file)

            with CatalogClient(config.base_url, timeout=config.request_timeout) as client:
                view = CatalogView(client)
                if json_output:
                    await view.load()
                else:
                    with _spinner() as progress:
                        progress.add_task("Loading podcasts...", total=None)
                        await view.load()

            if view.state.is_failed:
                if json_output:
                    print(json.dumps({"error": view.error_message}, indent=2))
                else:
                    console.print(f"[red]✗[/red] {escape(view.error_message)}")
                sys.exit(1)

            options = ListingOptions(
                query=search,
                genre_id=genre,
                sort=sort or config.default_sort,
                page=page,
                page_size=page_size or config.page_size,
            )
            result = view.page(options)

            if json_output:
                data = {
                    "shows": [
                        {
                            "id": show.id,
                            "title": show.title,
                            "seasons": show.season_count,
                            "genres": label_genre_ids(show.genre_ids, genres),
                            "updated": show.updated.isoformat(),
                        }
                        for show in result.items
                    ],
                    "page": result.page,
                    "total_pages": result.total_pages,
                    "total": result.total_items,
                }
                print(json.dumps(data, indent=2))
                return

            if not result.items:
                console.print("[yellow]No podcasts match your filters.[/yellow]")
                return

            table = Table(title="[bold]Podcasts[/bold]")
            table.add_column("ID", style="dim", no_wrap=True)
            table.add_column("Title", style="cyan", max_width=50)
            table.add_column("Seasons", justify="right", style="yellow")
            table.add_column("Genres", style="green")
            table.add_column("Updated", style="blue")

            for show in result.items:
                table.add_row(
                    show.id,
                    escape(truncate_text(show.title, 50)),
                    str(show.season_count),
                    escape(", ".join(label_genre_ids(show.genre_ids, genres))),
                    format_updated(show.updated),
                )

            console.print(table)
            console.print(
                f"\n[dim]Page {result.page} of {result.total_pages} "
                f"({result.total_items} show(s))[/dim]"
            )
            if result.has_next:
                console.print(f"[dim]Next page: podexplorer shows --page {result.page + 1}[/dim]")

        except PodExplorerError as e:
            console.print(f"[red]✗[/red] Error: {escape(str(e))}")
            sys.exit(1)

    asyncio.run(run_listing())


@app.command("show")
def show_detail(
    ctx: typer.Context,
    show_id: Annotated[str, typer.Argument(help="Show identifier")],
    season: Annotated[
        int | None, typer.Option("--season", "-s", help="Season to display (1-based)", min=1)
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show details, seasons and episodes of one podcast.

    Examples:
        podexplorer show 10716

        podexplorer show 10716 --season 2
    """

    async def run_detail() -> None:
        try:
            config = _load_settings(ctx)
            genres = load_genres(config.genres_file)

            with CatalogClient(config.base_url, timeout=config.request_timeout) as client:
                view = ShowDetailView(client, genres)
                if json_output:
                    await view.load(show_id)
                else:
                    with _spinner() as progress:
                        progress.add_task("Loading show details...", total=None)
                        await view.load(show_id)

            detail = view.detail
            if detail is None:
                message = view.state.error or "Show not found."
                if json_output:
                    print(json.dumps({"error": message}, indent=2))
                else:
                    console.print(f"[red]✗[/red] Error loading show: {escape(message)}")
                    console.print("  Back to the listing: [cyan]podexplorer shows[/cyan]")
                sys.exit(1)

            if season is not None:
                try:
                    view.select_season(season - 1)
                except ValueError:
                    console.print(
                        f"[red]✗[/red] Season {season} not available "
                        f"({detail.season_count} season(s))"
                    )
                    sys.exit(1)

            current = view.current_season

            if json_output:
                data = {
                    "id": detail.id,
                    "title": detail.title,
                    "description": detail.description,
                    "genres": view.genre_labels,
                    "updated": detail.updated.isoformat(),
                    "total_seasons": detail.season_count,
                    "total_episodes": view.total_episodes,
                    "season": current.model_dump(mode="json") if current else None,
                }
                print(json.dumps(data, indent=2))
                return

            console.print(f"\n[bold cyan]{escape(detail.title)}[/bold cyan]")
            if detail.description:
                console.print(escape(detail.description))
            console.print()

            meta = Table(show_header=False, box=None)
            meta.add_column("Key", style="dim")
            meta.add_column("Value")
            meta.add_row("GENRES", escape(", ".join(view.genre_labels)) or "—")
            meta.add_row("LAST UPDATED", format_updated(detail.updated))
            meta.add_row("TOTAL SEASONS", f"{detail.season_count} Seasons")
            meta.add_row("TOTAL EPISODES", f"{view.total_episodes} Episodes")
            console.print(meta)

            if current is None:
                console.print("\n[yellow]This show has no seasons yet.[/yellow]")
                return

            console.print(
                "\n[bold]Seasons:[/bold] "
                + ", ".join(
                    f"[bold]{s.season_number}[/bold]" if s is current else str(s.season_number)
                    for s in detail.seasons
                )
            )

            table = Table(
                title=(
                    f"Season {current.season_number}: {escape(current.title)} "
                    f"({current.episode_count} Episodes)"
                ),
                show_lines=True,
            )
            table.add_column("#", style="dim", width=4)
            table.add_column("Title", style="cyan", max_width=40)
            table.add_column("Summary")

            for number, episode in enumerate(current.episodes, 1):
                table.add_row(
                    f"Episode {number}",
                    escape(episode.title),
                    escape(episode_summary(episode)),
                )

            console.print(table)

        except PodExplorerError as e:
            console.print(f"[red]✗[/red] Error: {escape(str(e))}")
            sys.exit(1)

    asyncio.run(run_detail())


@app.command("genres")
def list_genres(ctx: typer.Context) -> None:
    """List the genre reference data used for labels and filtering."""
    try:
        config = _load_settings(ctx)
        genres = load_genres(config.genres_file)

        table = Table(title="[bold]Genres[/bold]")
        table.add_column("ID", justify="right", style="yellow")
        table.add_column("Title", style="cyan")
        for genre in genres:
            table.add_row(str(genre.id), escape(genre.title))

        console.print(table)
        console.print("\n[dim]Filter with: podexplorer shows --genre <id>[/dim]")

    except PodExplorerError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="Action: show or set <key> <value>"),
    key: str | None = typer.Argument(None, help="Config key (for 'set' action)"),
    value: str | None = typer.Argument(None, help="Config value (for 'set' action)"),
) -> None:
    """Manage Podexplorer configuration.

    Examples:
        podexplorer config show

        podexplorer config set page_size 24
    """
    try:
        manager = ConfigManager()

        if action == "show":
            config = manager.load_config()

            console.print("\n[bold]Podexplorer Configuration[/bold]\n")

            table = Table(show_header=False, box=None)
            table.add_column("Key", style="cyan")
            table.add_column("Value", style="white")

            table.add_row("Config file", str(manager.config_file))
            table.add_row("", "")
            table.add_row("Catalog URL", config.base_url)
            table.add_row(
                "Request timeout",
                f"{config.request_timeout}s" if config.request_timeout else "default",
            )
            table.add_row("Page size", str(config.page_size))
            table.add_row("Default sort", config.default_sort.value)
            table.add_row("Log level", config.log_level)
            table.add_row("Genres file", str(config.genres_file) if config.genres_file else "built-in")

            console.print(table)

        elif action == "set":
            if not key or value is None:
                console.print("[red]✗[/red] Usage: podexplorer config set <key> <value>")
                sys.exit(1)

            try:
                manager.set_value(key, value)
            except ConfigError as e:
                console.print(f"[red]✗[/red] {escape(str(e))}")
                if key not in GlobalConfig.model_fields:
                    console.print("\nAvailable keys:")
                    for field_name in GlobalConfig.model_fields:
                        console.print(f"  • {field_name}")
                sys.exit(1)

            console.print(
                f"[green]✓[/green] Set [cyan]{key}[/cyan] = [yellow]{escape(value)}[/yellow]"
            )

        else:
            console.print(f"[red]✗[/red] Unknown action: {escape(action)}")
            console.print("Valid actions: show, set")
            sys.exit(1)

    except PodExplorerError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    app()
