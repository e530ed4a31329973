"""Weapon drill commands for Blue Lock Terminal CLI."""

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
def drill() -> None:
    """Log and review weapon drills.

    \b
    Examples:
      bluelock drill add "Tape reading" --intensity 8
      bluelock drill add "Sprints" --category FITNESS
      bluelock drill list
    """
    pass


@drill.command("add")
@click.argument("weapon")
@click.option(
    "--intensity",
    type=click.IntRange(1, 10),
    default=5,
    show_default=True,
    help="Session intensity from 1 to 10.",
)
@click.option(
    "--category",
    type=click.Choice(["TRADING", "FITNESS", "SKILL", "MINDSET"], case_sensitive=False),
    default="TRADING",
    show_default=True,
    help="Drill category.",
)
def add_drill(weapon: str, intensity: int, category: str) -> None:
    """Record a drill session.

    WEAPON is the skill or activity you practiced.
    """
    from bluelock.stats import drill_streak

    store = _get_store()
    entry = store.append_drill(weapon, intensity=intensity, category=category)

    if entry is None:
        console.print("[dim]Nothing logged: drill name is blank.[/dim]")
        return

    console.print(
        f"[green]✓ Logged {entry.weapon}[/green] "
        f"[dim]({entry.category}, intensity {entry.intensity})[/dim]"
    )
    console.print(f"[bold]Streak:[/bold] {drill_streak(store.drill_entries)}")


@drill.command("list")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=10,
    show_default=True,
    help="Number of recent drills to show.",
)
def list_drills(limit: int) -> None:
    """Show recent drills, newest first, with the current streak."""
    from bluelock.stats import drill_streak

    store = _get_store()
    drills = store.drill_entries

    console.print(Panel(
        f"[bold cyan]{drill_streak(drills)}[/bold cyan]",
        title="[bold]STREAK[/bold]",
        border_style="cyan",
    ))

    if not drills:
        console.print("[dim]No drills yet[/dim]")
        return

    table = Table(title="Recent Drills", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Weapon", style="bold")
    table.add_column("Category")
    table.add_column("Intensity", justify="right")

    for entry in list(reversed(drills))[:limit]:
        table.add_row(
            entry.timestamp.strftime("%Y-%m-%d"),
            entry.weapon,
            entry.category,
            str(entry.intensity),
        )

    console.print(table)
