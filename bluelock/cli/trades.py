"""Trade log commands for Blue Lock Terminal CLI."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def _get_store():
    """Get the initialized record store."""
    from bluelock.config import open_store

    return open_store()


def _format_pnl(pnl: float) -> str:
    color = "green" if pnl >= 0 else "red"
    sign = "+" if pnl >= 0 else ""
    return f"[{color}]{sign}{pnl:.2f}[/{color}]"


@click.group()
def trade() -> None:
    """Log and review completed trades.

    \b
    Examples:
      bluelock trade add AAPL --entry 10 --exit 15 --shares 2
      bluelock trade add TSLA --entry 200 --exit 190 --result LOSS
      bluelock trade list
    """
    pass


@trade.command("add")
@click.argument("ticker")
@click.option("--entry", "entry_price", default="0", help="Entry price.")
@click.option("--exit", "exit_price", default="0", help="Exit price.")
@click.option("--shares", default="1", show_default=True, help="Number of shares.")
@click.option(
    "--result",
    type=click.Choice(["WIN", "LOSS", "BREAKEVEN"], case_sensitive=False),
    default="WIN",
    show_default=True,
    help="Trade outcome.",
)
@click.option("--notes", default="", help="Notes for this trade.")
def add_trade(
    ticker: str, entry_price: str, exit_price: str, shares: str, result: str, notes: str
) -> None:
    """Record a completed trade.

    TICKER is the traded symbol. Prices that are not numbers are
    recorded as 0; P&L is (exit - entry) * shares.
    """
    store = _get_store()
    entry = store.append_trade(
        ticker,
        entry_price=entry_price,
        exit_price=exit_price,
        shares=shares,
        result=result,
        notes=notes,
    )

    console.print(
        f"[green]✓ Logged {entry.result} on {entry.ticker or '-'}[/green]  "
        f"P/L: {_format_pnl(entry.pnl)}"
    )


@trade.command("list")
def list_trades() -> None:
    """Show all trades, newest first, with win rate and total P/L."""
    from bluelock.stats import total_pnl, win_rate

    store = _get_store()
    trades = store.trade_entries

    if not trades:
        console.print(Panel(
            "[dim]No trades yet[/dim]",
            title="[bold]Trade Log[/bold]",
            border_style="dim",
        ))
        return

    table = Table(title="Trade Log", show_header=True, header_style="bold cyan")
    table.add_column("Date", style="dim")
    table.add_column("Ticker", style="bold")
    table.add_column("Result", justify="center")
    table.add_column("Shares", justify="right")
    table.add_column("Entry", justify="right")
    table.add_column("Exit", justify="right")
    table.add_column("P/L", justify="right")
    table.add_column("Notes", style="dim")

    result_colors = {"WIN": "green", "LOSS": "red", "BREAKEVEN": "yellow"}

    for entry in reversed(trades):
        color = result_colors[entry.result]
        table.add_row(
            entry.timestamp.strftime("%Y-%m-%d"),
            entry.ticker,
            f"[{color}]{entry.result}[/{color}]",
            str(entry.shares),
            f"${entry.entry_price:.2f}",
            f"${entry.exit_price:.2f}",
            _format_pnl(entry.pnl),
            entry.notes,
        )

    console.print(table)

    console.print(f"\n[bold]Trades:[/bold] {len(trades)}")
    console.print(f"[bold]Win Rate:[/bold] {win_rate(trades)}%")
    console.print(f"[bold]Total P/L:[/bold] {_format_pnl(total_pnl(trades))}")
