"""Settings and reset commands for Blue Lock Terminal CLI.

Handles the capital goal settings and wiping logged records.
"""

from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def _get_store():
    """Get the initialized record store."""
    from bluelock.config import open_store

    return open_store()


def _print_settings(settings) -> None:
    table = Table(title="Capital Settings", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Starting Capital", f"${settings.starting_capital:,.0f}")
    table.add_row("Target Capital", f"${settings.target_capital:,.0f}")
    table.add_row("Weekly Injection", f"${settings.weekly_injection:,.0f}")
    table.add_row("Current Capital", f"${settings.current_capital:,.0f}")
    console.print(table)


@click.group()
def settings() -> None:
    """View and edit capital settings.

    \b
    Examples:
      bluelock settings show
      bluelock settings set --current 5200
      bluelock settings set --target 20000 --weekly 100
    """
    pass


@settings.command("show")
def show_settings() -> None:
    """Display current capital settings."""
    store = _get_store()
    _print_settings(store.settings)


@settings.command("set")
@click.option("--starting", default=None, help="Starting capital.")
@click.option("--target", default=None, help="Target capital.")
@click.option("--weekly", default=None, help="Weekly injection.")
@click.option("--current", default=None, help="Current capital.")
def set_settings(
    starting: Optional[str],
    target: Optional[str],
    weekly: Optional[str],
    current: Optional[str],
) -> None:
    """Update capital settings.

    Values are whole amounts; anything that is not a number is saved as 0.
    """
    from bluelock.models.coerce import coerce_int

    changes = {
        name: coerce_int(value, default=0)
        for name, value in (
            ("starting_capital", starting),
            ("target_capital", target),
            ("weekly_injection", weekly),
            ("current_capital", current),
        )
        if value is not None
    }

    if not changes:
        console.print("[yellow]Nothing to update.[/yellow] [dim]See --help for options.[/dim]")
        return

    store = _get_store()
    updated = store.update_settings(store.settings.replace(**changes))

    console.print("[green]✓ Settings updated[/green]\n")
    _print_settings(updated)


@click.command()
@click.option(
    "--confirm",
    is_flag=True,
    help="Skip confirmation prompt.",
)
def reset(confirm: bool) -> None:
    """Delete all ego, trade and drill entries.

    Capital settings are kept.

    \b
    Examples:
      bluelock reset           # Reset with confirmation
      bluelock reset --confirm # Reset without confirmation
    """
    store = _get_store()

    console.print("[bold red]RESET ALL DATA[/bold red]\n")
    console.print(f"Ego entries: [yellow]{len(store.ego_entries)}[/yellow]")
    console.print(f"Trades:      [yellow]{len(store.trade_entries)}[/yellow]")
    console.print(f"Drills:      [yellow]{len(store.drill_entries)}[/yellow]\n")

    if not confirm:
        if not click.confirm("This cannot be undone. Are you sure?"):
            console.print("[dim]Reset cancelled.[/dim]")
            return

    store.reset_all()

    console.print(Panel(
        "[green]All entries have been deleted.[/green]\n\n"
        "[dim]Capital settings were kept.[/dim]",
        title="[bold green]Reset Complete[/bold green]",
        border_style="green",
    ))
