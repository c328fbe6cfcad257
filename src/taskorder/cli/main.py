"""
CLI main entry point for taskorder
"""

import importlib
from pathlib import Path

import click
import typer.main

from taskorder.core.config_manager import get_config_manager
from taskorder.core.errors import ConfigurationError
from taskorder.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _load_env_file() -> None:
    """
    Load .env file from the working directory using ConfigManager.
    """
    config_manager = get_config_manager()
    config_manager.load_env_files([Path.cwd() / ".env"], override=False)


class LazyGroup(click.Group):
    """A Click Group that lazy-loads command modules."""

    def __init__(
        self,
        name: str | None = None,
        commands: dict[str, click.Command] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(name=name, commands=commands or {}, **kwargs)
        self._lazy_commands = {
            "resolve": ("taskorder.cli.commands.resolve", "app", "Resolve the execution order of tasks"),
            "config": ("taskorder.cli.commands.config", "app", "Inspect taskorder configuration"),
        }

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return list of all commands (lazy + regular)."""
        return sorted(set(list(self.commands) + list(self._lazy_commands)))

    def format_commands(
        self, ctx: click.Context, formatter: click.HelpFormatter
    ) -> None:
        """Format commands for help without loading them."""
        commands = []
        for cmd_name in self.list_commands(ctx):
            if cmd_name in self._lazy_commands:
                _, _, help_text = self._lazy_commands[cmd_name]
                commands.append((cmd_name, help_text))
            elif cmd_name in self.commands:
                cmd = self.commands[cmd_name]
                commands.append((cmd_name, cmd.get_short_help_str(formatter.width)))

        if commands:
            with formatter.section("Commands"):
                formatter.write_dl(commands)

    def get_command(self, ctx: click.Context, name: str) -> click.Command | None:
        """Get command, lazily loading if needed."""
        if name in self.commands:
            return self.commands[name]

        if name not in self._lazy_commands:
            return None

        module_path, attr_name, _ = self._lazy_commands[name]
        try:
            module = importlib.import_module(module_path)
            typer_app = getattr(module, attr_name)
        except (ImportError, AttributeError) as e:
            logger.error(f"Failed to load command {name}: {e}")
            return None

        # Convert Typer app to Click command and cache it
        click_cmd = typer.main.get_command(typer_app)
        self.commands[name] = click_cmd
        return click_cmd


@click.group(
    cls=LazyGroup,
    name="taskorder",
    help="Resolve task execution order from dependency declarations",
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Main CLI entry point."""
    _load_env_file()
    config_manager = get_config_manager()
    try:
        if log_level:
            config_manager.set_log_level(log_level)
        configure_logging(config_manager.get_log_level())
    except ConfigurationError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)


@cli.command()
def version() -> None:
    """Show version information."""
    from taskorder import __version__

    click.echo(f"taskorder version {__version__}")


def main() -> None:
    """Entry point for console script."""
    cli()


app = cli

if __name__ == "__main__":
    app()
