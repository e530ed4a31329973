"""Dashboard and statistics commands for Blue Lock Terminal CLI.

Every view recomputes its statistics from the stored records.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def _get_store():
    """Get the initialized record store."""
    from bluelock.config import open_store

    return open_store()


def _summarize(store):
    from bluelock.stats import summarize

    return summarize(
        store.ego_entries,
        store.trade_entries,
        store.drill_entries,
        store.settings,
    )


def render_bar(percent: float, width: int = 30) -> str:
    """Render a text progress bar for a 0-100 percentage."""
    percent = min(100.0, max(0.0, percent))
    filled = int(round(width * percent / 100))
    return "█" * filled + "░" * (width - filled)


def _signed_money(value: float) -> str:
    color = "green" if value >= 0 else "red"
    sign = "+" if value >= 0 else ""
    return f"[{color}]{sign}${value:,.2f}[/{color}]"


@click.command()
def dashboard() -> None:
    """Show ego status, capital mission progress and today's numbers.

    \b
    Examples:
      bluelock dashboard
    """
    from bluelock.stats import ego_color

    store = _get_store()
    summary = _summarize(store)
    settings = store.settings

    # Ego status
    latest = summary.latest_ego
    if latest is not None:
        color = ego_color(latest.score)
        ego_lines = [
            f"[bold {color}]{latest.score}[/bold {color}]  [{color}]{latest.label}[/{color}]",
        ]
        if summary.ego_trend != 0:
            arrow, trend_color = ("▲", "green") if summary.ego_trend > 0 else ("▼", "red")
            ego_lines.append(
                f"[{trend_color}]{arrow} {abs(summary.ego_trend)}% from last entry[/{trend_color}]"
            )
        ego_lines.append(f"[{color}]{render_bar(latest.score)}[/{color}]")
    else:
        ego_lines = ["[bold]--[/bold]  [dim]NO DATA[/dim]", f"[dim]{render_bar(0)}[/dim]"]

    console.print(Panel(
        "\n".join(ego_lines),
        title="[bold]EGO STATUS[/bold]",
        border_style="cyan",
    ))

    # Capital mission
    mission = (
        f"[bold]PROGRESS[/bold] {summary.progress_percent:.1f}%\n"
        f"[#00F0FF]{render_bar(summary.progress_percent)}[/#00F0FF]\n\n"
        f"Current:   ${settings.current_capital:,.0f}\n"
        f"Target:    ${settings.target_capital:,.0f}\n"
        f"Remaining: [yellow]${summary.capital_remaining:,.0f}[/yellow]"
    )
    console.print(Panel(
        mission,
        title=f"[bold]${settings.target_capital:,.0f} MISSION[/bold]",
        border_style="cyan",
    ))

    # Today's stats
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Streak", justify="center")
    table.add_column("Trades", justify="center")
    table.add_column("Win Rate", justify="center")
    table.add_row(
        str(summary.streak),
        str(summary.trade_count),
        f"{summary.win_rate}%",
    )
    console.print(table)

    console.print('\n[dim italic]"THE MOMENT YOU\'RE SATISFIED IS THE MOMENT YOU LOSE."[/dim italic]')


@click.command()
def stats() -> None:
    """Show the full statistics breakdown.

    \b
    Examples:
      bluelock stats
    """
    store = _get_store()
    summary = _summarize(store)

    ego_table = Table(title="Ego", show_header=True, header_style="bold cyan")
    ego_table.add_column("Metric", style="bold")
    ego_table.add_column("Value", justify="right")
    ego_table.add_row("Entries", str(summary.ego_count))
    ego_table.add_row("Average", str(summary.average_ego))
    console.print(ego_table)

    trade_table = Table(title="Trades", show_header=True, header_style="bold cyan")
    trade_table.add_column("Metric", style="bold")
    trade_table.add_column("Value", justify="right")
    trade_table.add_row("Total", str(summary.trade_count))
    trade_table.add_row("Wins", f"[green]{summary.wins}[/green]")
    trade_table.add_row("Losses", f"[red]{summary.losses}[/red]")
    trade_table.add_row("Win Rate", f"{summary.win_rate}%")
    trade_table.add_row("Total P&L", _signed_money(summary.total_pnl))
    trade_table.add_row("Avg Win", f"[green]${summary.average_win:,.2f}[/green]")
    trade_table.add_row("Avg Loss", f"[red]${summary.average_loss:,.2f}[/red]")
    console.print(trade_table)

    drill_table = Table(title="Drills", show_header=True, header_style="bold cyan")
    drill_table.add_column("Category", style="bold")
    drill_table.add_column("Sessions", justify="right")
    for category, count in summary.categories.items():
        drill_table.add_row(category, str(count))
    drill_table.add_row("[dim]Total[/dim]", f"[dim]{summary.drill_count}[/dim]")
    console.print(drill_table)

    console.print(f"\n[bold]Current streak:[/bold] {summary.streak}")
