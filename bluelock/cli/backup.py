"""Backup commands for Blue Lock Terminal CLI.

Exports the whole store to a dated JSON file and restores from one.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

console = Console()


def _get_store():
    """Get the initialized record store."""
    from bluelock.config import open_store

    return open_store()


@click.command()
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the backup to (default: current directory).",
)
def export(output_dir: Optional[Path]) -> None:
    """Export all data to a JSON backup file.

    The file is named bluelock-backup-YYYY-MM-DD.json.

    \b
    Examples:
      bluelock export
      bluelock export --output ~/backups
    """
    from bluelock.db.export import backup_filename, export_snapshot, write_snapshot

    store = _get_store()
    now = datetime.now(timezone.utc)
    document = export_snapshot(store, now=now)
    path = (output_dir or Path.cwd()) / backup_filename(now)

    try:
        write_snapshot(path, document)
    except OSError as e:
        console.print(Panel(
            f"[red]Failed to write backup:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    console.print(f"[green]✓ Exported to {path}[/green]")
    console.print(
        f"[dim]{len(document['egoEntries'])} ego, "
        f"{len(document['tradeEntries'])} trades, "
        f"{len(document['drillEntries'])} drills[/dim]"
    )


@click.command("import")
@click.argument("backup_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--confirm",
    is_flag=True,
    help="Skip confirmation prompt.",
)
def import_backup(backup_file: Path, confirm: bool) -> None:
    """Restore all data from a JSON backup file.

    Replaces every ego entry, trade, drill and the capital settings.

    \b
    Examples:
      bluelock import bluelock-backup-2026-01-31.json
    """
    from bluelock.db.export import SnapshotError, import_snapshot, read_snapshot

    if not confirm:
        if not click.confirm("This replaces all current data. Continue?"):
            console.print("[dim]Import cancelled.[/dim]")
            return

    store = _get_store()

    try:
        snapshot = import_snapshot(store, read_snapshot(backup_file))
    except SnapshotError as e:
        console.print(Panel(
            f"[red]Failed to import backup:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    console.print(f"[green]✓ Imported {backup_file}[/green]")
    console.print(
        f"[dim]{len(snapshot.ego_entries)} ego, "
        f"{len(snapshot.trade_entries)} trades, "
        f"{len(snapshot.drill_entries)} drills[/dim]"
    )
