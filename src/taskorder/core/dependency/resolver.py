"""
Dependency resolution for task ordering

This module computes an execution order from a dependency graph with a
post-order depth-first walk. Tasks are visited in declaration order and each
task's dependencies in the order they were declared, so unrelated tasks keep
their relative order and the result is deterministic.

Cycle detection is part of the same walk: a node that is reached again while
it is still on the active path closes a cycle, and the call raises
CyclicDependencyError before anything is returned.
"""

from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from taskorder.core.config_manager import DEFAULT_MAX_TASKS, get_config_manager
from taskorder.core.dependency.graph import DependencyGraph, build_graph
from taskorder.core.errors import ConfigurationError, CyclicDependencyError
from taskorder.logger import get_logger

logger = get_logger(__name__)


class VisitState(Enum):
    """Traversal color of a node during one resolve call."""

    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


def resolve_graph(graph: DependencyGraph) -> List[str]:
    """
    Order the tasks of a graph so every dependency precedes its dependents.

    Args:
        graph: Prebuilt dependency graph

    Returns:
        Task names in execution order

    Raises:
        CyclicDependencyError: If the graph contains a cycle
    """
    try:
        max_tasks = get_config_manager().get_max_tasks()
    except ConfigurationError as e:
        # The limit is advisory; a bad value never fails a resolve
        logger.warning(f"Ignoring task limit, using {DEFAULT_MAX_TASKS}: {e.message}")
        max_tasks = DEFAULT_MAX_TASKS
    if len(graph) > max_tasks:
        logger.warning(
            f"Resolving {len(graph)} tasks, more than the configured limit of {max_tasks}"
        )

    # Traversal state is local to this call and never stored on the graph
    state = [VisitState.UNVISITED] * len(graph)
    path: List[int] = []
    order: List[str] = []

    def visit(node: int) -> None:
        if state[node] is VisitState.RESOLVED:
            return
        if state[node] is VisitState.IN_PROGRESS:
            cycle_start = path.index(node)
            cycle = [graph.tasks[i] for i in path[cycle_start:]] + [graph.tasks[node]]
            raise CyclicDependencyError(cycle)

        state[node] = VisitState.IN_PROGRESS
        path.append(node)
        for dep in graph.dependencies[node]:
            visit(dep)
        path.pop()
        state[node] = VisitState.RESOLVED
        order.append(graph.tasks[node])

    for node in range(len(graph)):
        if state[node] is not VisitState.RESOLVED:
            visit(node)

    logger.debug(f"Resolved execution order: {order}")
    return order


def resolve(tasks: Sequence[str], edges: Iterable[Tuple[str, str]]) -> List[str]:
    """
    Build the dependency graph for tasks and edges and resolve its order.

    Args:
        tasks: Unique task names in declaration order
        edges: (dependent, dependent_on) pairs in declaration order

    Returns:
        Task names in execution order

    Raises:
        DuplicateTaskError: If a task name appears twice
        UnknownTaskError: If an edge references an undeclared task
        CyclicDependencyError: If the dependencies form a cycle
    """
    return resolve_graph(build_graph(tasks, edges))


__all__ = ["VisitState", "resolve", "resolve_graph"]
