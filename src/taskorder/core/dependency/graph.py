"""
Dependency graph construction

This module builds the immutable graph the resolver walks. Tasks are stored
once, in declaration order, and addressed by their index; each node keeps the
indices of the tasks it depends on in the order the edges were declared.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from taskorder.core.dependency.parser import Edge
from taskorder.core.errors import DuplicateTaskError, UnknownTaskError
from taskorder.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DependencyGraph:
    """
    Immutable dependency graph.

    Attributes:
        tasks: Task names in declaration order; a task's position is its node index
        index: Task name -> node index
        dependencies: For each node index, the node indices it depends on
    """

    tasks: Tuple[str, ...]
    index: Mapping[str, int]
    dependencies: Tuple[Tuple[int, ...], ...]

    def __len__(self) -> int:
        return len(self.tasks)

    def __contains__(self, task: object) -> bool:
        return task in self.index

    def dependencies_of(self, task: str) -> Tuple[str, ...]:
        """Names of the direct dependencies of task, in declaration order."""
        return tuple(self.tasks[i] for i in self.dependencies[self.index[task]])

    @property
    def edges(self) -> List[Edge]:
        """All edges, grouped by dependent in task order."""
        return [
            Edge(self.tasks[node], self.tasks[dep])
            for node, deps in enumerate(self.dependencies)
            for dep in deps
        ]


def build_graph(tasks: Sequence[str], edges: Iterable[Tuple[str, str]]) -> DependencyGraph:
    """
    Build a dependency graph from task names and (dependent, dependent_on) pairs.

    Args:
        tasks: Unique task names in declaration order
        edges: Dependency pairs in declaration order

    Returns:
        DependencyGraph

    Raises:
        DuplicateTaskError: If a task name appears twice
        UnknownTaskError: If an edge references a task not in tasks
    """
    index: Dict[str, int] = {}
    for position, task in enumerate(tasks):
        if task in index:
            raise DuplicateTaskError(task, index[task], position)
        index[task] = position

    adjacency: List[List[int]] = [[] for _ in index]
    edge_count = 0
    for dependent, dependent_on in edges:
        for endpoint in (dependent, dependent_on):
            if endpoint not in index:
                raise UnknownTaskError(endpoint, (dependent, dependent_on))
        targets = adjacency[index[dependent]]
        target = index[dependent_on]
        # repeated declarations of the same edge collapse into one
        if target not in targets:
            targets.append(target)
            edge_count += 1

    logger.debug(f"Built dependency graph with {len(index)} tasks and {edge_count} edges")
    return DependencyGraph(
        tasks=tuple(index),
        index=MappingProxyType(index),
        dependencies=tuple(tuple(targets) for targets in adjacency),
    )


__all__ = ["DependencyGraph", "build_graph"]
