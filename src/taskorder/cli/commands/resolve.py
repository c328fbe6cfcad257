"""
Resolve command

Computes the execution order for tasks given on the command line or in a
JSON plan file:

    {"tasks": ["a", "b"], "dependencies": ["a => b"]}
"""

from pathlib import Path
from typing import List, Optional

import pydantic
import typer
from rich.console import Console
from rich.table import Table

from taskorder.core.errors import TaskorderError
from taskorder.core.models import ScheduleRequest, ScheduleResult
from taskorder.logger import get_logger

logger = get_logger(__name__)
console = Console()

app = typer.Typer(name="resolve", help="Resolve the execution order of tasks")


def _load_request(
    tasks: Optional[List[str]],
    dependencies: Optional[List[str]],
    file: Optional[Path],
) -> ScheduleRequest:
    if file is not None:
        if tasks or dependencies:
            typer.echo("❌ Use either --file or tasks/--dependency, not both", err=True)
            raise typer.Exit(2)
        try:
            return ScheduleRequest.model_validate_json(file.read_text(encoding="utf-8"))
        except (pydantic.ValidationError, UnicodeDecodeError) as e:
            typer.echo(f"❌ Invalid plan file {file}:\n{e}", err=True)
            raise typer.Exit(1)
    return ScheduleRequest(tasks=tasks or [], dependencies=dependencies or [])


def _print_table(result: ScheduleResult) -> None:
    if not result.order:
        console.print("No tasks to schedule")
        return
    table = Table(title="Execution order")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Task", style="green")
    for position, task in enumerate(result.order, start=1):
        table.add_row(str(position), task)
    console.print(table)


@app.command()
def resolve(
    tasks: Optional[List[str]] = typer.Argument(
        None, help="Task names in declaration order"
    ),
    dependencies: Optional[List[str]] = typer.Option(
        None,
        "--dependency",
        "-d",
        help="Dependency declaration '<dependent> => <dependent_on>' (repeatable)",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        help="JSON plan file with 'tasks' and 'dependencies'",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the order as JSON"),
):
    """
    Resolve the execution order of tasks.

    Examples:
        taskorder resolve a b c -d "a => b" -d "b => c"
        taskorder resolve --file plan.json --json
    """
    request = _load_request(tasks, dependencies, file)
    try:
        result = request.resolve()
    except TaskorderError as e:
        logger.debug(f"Resolution failed: {e.message}")
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(result.model_dump_json())
    else:
        _print_table(result)
