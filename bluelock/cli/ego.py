"""Ego rating commands for Blue Lock Terminal CLI."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def _get_store():
    """Get the initialized record store."""
    from bluelock.config import open_store

    return open_store()


@click.group()
def ego() -> None:
    """Log and review ego self-ratings.

    \b
    Examples:
      bluelock ego log 72 --notes "Held my stops"
      bluelock ego history
    """
    pass


@ego.command("log")
@click.argument("score", type=click.IntRange(0, 100))
@click.option("--notes", default="", help="Notes for this rating.")
def log_ego(score: int, notes: str) -> None:
    """Record an ego rating.

    SCORE is your self-rating from 0 to 100.
    """
    from bluelock.stats import ego_color

    store = _get_store()
    entry = store.append_ego(score, notes)
    color = ego_color(entry.score)

    console.print(Panel(
        f"[bold {color}]{entry.score}[/bold {color}]  [{color}]{entry.label}[/{color}]",
        title="[bold]EGO LOGGED[/bold]",
        border_style=color,
    ))


@ego.command("history")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=7,
    show_default=True,
    help="Number of recent entries to show.",
)
def history(limit: int) -> None:
    """Show recent ego ratings, newest first."""
    from bluelock.stats import ego_color

    store = _get_store()
    entries = list(reversed(store.ego_entries))[:limit]

    if not entries:
        console.print(Panel(
            "[dim]No entries yet[/dim]",
            title="[bold]Ego History[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title="Ego History", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Score", justify="right")
    table.add_column("Label")
    table.add_column("Notes", style="dim")

    for entry in entries:
        # Stored labels are historical; only the color is recomputed.
        color = ego_color(entry.score)
        table.add_row(
            entry.timestamp.strftime("%Y-%m-%d"),
            f"[{color}]{entry.score}[/{color}]",
            f"[{color}]{entry.label}[/{color}]",
            entry.notes,
        )

    console.print(table)
