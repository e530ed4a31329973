"""Main CLI entry point for Blue Lock Terminal.

This module provides the main click group and lazy loading
of command modules.
"""

import logging

import click
from rich.console import Console

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when they are actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        # Commands are usually attributes named after the command; "import"
        # is a keyword, so fall back to matching on the command name.
        attr = getattr(module, cmd_name, None)
        if isinstance(attr, click.Command):
            cmd = attr
        else:
            cmd = None
            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if isinstance(attr, click.Command) and attr.name == cmd_name:
                    cmd = attr
                    break

            if cmd is None:
                raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    "init": "bluelock.cli.setup",
    "dashboard": "bluelock.cli.dashboard",
    "stats": "bluelock.cli.dashboard",
    "ego": "bluelock.cli.ego",
    "trade": "bluelock.cli.trades",
    "drill": "bluelock.cli.drills",
    "settings": "bluelock.cli.settings",
    "reset": "bluelock.cli.settings",
    "export": "bluelock.cli.backup",
    "import": "bluelock.cli.backup",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through rich."""
    from rich.logging import RichHandler

    from bluelock.config import get_log_level, load_config

    level = "DEBUG" if verbose else get_log_level(load_config())
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="bluelock-terminal")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """BLUE LOCK TERMINAL - devour or be devoured.

    Track your ego, log trades and weapon drills, and watch your
    progress toward the capital target. Everything stays on this machine.

    \b
    Quick Start:
      bluelock init              # Create a config file
      bluelock ego log 72        # Rate yourself
      bluelock dashboard         # See where you stand
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
