"""
Schedule resolution entry point

Validates raw caller input, parses the dependency declarations and hands the
result to the resolver.

Example:
    >>> resolve_schedule(["a", "b", "c"], ["a => b", "b => c"])
    ['c', 'b', 'a']
"""

from typing import List, Optional, Sequence

from taskorder.core.dependency.parser import is_task_name, parse_declarations
from taskorder.core.dependency.resolver import resolve
from taskorder.core.errors import InvalidInputError


def _require_sequence(name: str, value: object) -> None:
    if value is None:
        raise InvalidInputError(
            f"Invalid inputs: {name} is required",
            what="Invalid inputs",
            why=f"'{name}' was not provided",
            how_to_fix="Pass a list (possibly empty) for both tasks and dependencies",
            context={"argument": name},
        )
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidInputError(
            f"Invalid inputs: {name} must be a list of strings",
            what="Invalid inputs",
            why=f"'{name}' must be a list of strings, got {type(value).__name__}",
            how_to_fix="Pass a list (possibly empty) for both tasks and dependencies",
            context={"argument": name},
        )


def resolve_schedule(
    tasks: Optional[Sequence[str]],
    dependencies: Optional[Sequence[str]],
) -> List[str]:
    """
    Compute the execution order for tasks given "a => b" declarations.

    ``a => b`` means task ``a`` depends on ``b``, so ``b`` runs first. Tasks
    without a dependency relation keep the order they were declared in.

    Args:
        tasks: Unique lowercase task names in declaration order
        dependencies: Declarations of the form ``"<dependent> => <dependent_on>"``

    Returns:
        A new list with every task exactly once, dependencies first

    Raises:
        InvalidInputError: If tasks or dependencies is missing or not a list of strings
        MalformedDeclarationError: If a declaration cannot be parsed
        DuplicateTaskError: If a task is declared twice
        UnknownTaskError: If a declaration references an undeclared task
        CyclicDependencyError: If the declarations form a cycle
    """
    _require_sequence("tasks", tasks)
    _require_sequence("dependencies", dependencies)

    for position, task in enumerate(tasks):
        if not is_task_name(task):
            raise InvalidInputError(
                f"Invalid task name: {task!r}",
                what=f"Invalid task name {task!r}",
                why="Tasks are identified by a lowercase word",
                how_to_fix="Rename the task using only the letters a-z",
                context={"position": position},
            )

    edges = parse_declarations(dependencies)
    return resolve(tasks, edges)


__all__ = ["resolve_schedule"]
