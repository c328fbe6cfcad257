"""
Configuration commands.

Provides commands to inspect the effective configuration:
- show: print every setting and where it comes from
- check: validate the environment settings
"""

import os

import typer
from rich.console import Console
from rich.table import Table

from taskorder.core.config_manager import ENV_LOG_LEVEL, ENV_MAX_TASKS, get_config_manager
from taskorder.core.errors import ConfigurationError

console = Console()

app = typer.Typer(
    name="config",
    help="Inspect taskorder configuration",
    no_args_is_help=True,
)

_ENV_VARS = {"max_tasks": ENV_MAX_TASKS, "log_level": ENV_LOG_LEVEL}


@app.command("show")
def show_config():
    """
    Show the effective configuration.

    Examples:
        taskorder config show
        TASKORDER_MAX_TASKS=100 taskorder config show
    """
    try:
        values = get_config_manager().as_dict()
    except ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    table = Table(title="taskorder configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source")
    for key, value in values.items():
        env_var = _ENV_VARS[key]
        source = env_var if os.environ.get(env_var) else "default"
        table.add_row(key, str(value), source)
    console.print(table)


@app.command("check")
def check_config():
    """Validate configuration from the environment."""
    try:
        get_config_manager().as_dict()
    except ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    typer.echo("✅ Configuration is valid")
