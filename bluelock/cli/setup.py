"""Setup commands for Blue Lock Terminal CLI."""

import click
from rich.console import Console
from rich.panel import Panel

console = Console()


@click.command()
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite an existing config file.",
)
def init(force: bool) -> None:
    """Create a template config file.

    The config sets where data is stored, the first-run capital
    settings and the log level.

    \b
    Examples:
      bluelock init
      bluelock init --force
    """
    from bluelock.config import create_template_config, get_config_path

    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        console.print("[dim]Use --force to overwrite it.[/dim]")
        return

    try:
        path = create_template_config(config_path)
    except OSError as e:
        console.print(Panel(
            f"[red]Failed to create config:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    console.print(Panel(
        f"[green]✓ Config created[/green]\n\n[cyan]{path}[/cyan]",
        title="[bold]BLUE LOCK TERMINAL[/bold]",
        border_style="cyan",
    ))
