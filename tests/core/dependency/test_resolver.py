"""
Unit tests for taskorder.core.dependency.resolver
"""
import logging

import pytest

from taskorder.core.config_manager import get_config_manager
from taskorder.core.dependency import resolver
from taskorder.core.dependency.graph import build_graph
from taskorder.core.errors import CyclicDependencyError, UnknownTaskError


@pytest.mark.parametrize("tasks,edges,expected", [
    # No tasks
    ([], [], []),
    # No edges keeps declaration order
    (["a", "b", "c"], [], ["a", "b", "c"]),
    # Dependency declared after its dependent
    (["a", "b"], [("a", "b")], ["b", "a"]),
    # Independent chains keep their relative order
    (["a", "b", "c", "d"], [("a", "b"), ("c", "d")], ["b", "a", "d", "c"]),
    # Transitive chain
    (["a", "b", "c"], [("a", "b"), ("b", "c")], ["c", "b", "a"]),
    # Dependencies of one task are visited in declared edge order
    (["a", "b", "c"], [("a", "c"), ("a", "b")], ["c", "b", "a"]),
    # Shared dependency placed once, where first discovered
    (["a", "b", "c"], [("a", "c"), ("b", "c")], ["c", "a", "b"]),
    # Dependency already declared earlier
    (["b", "a"], [("a", "b")], ["b", "a"]),
    # Diamond
    (
        ["deploy", "build", "test", "fetch"],
        [("deploy", "build"), ("deploy", "test"), ("build", "fetch"), ("test", "fetch")],
        ["fetch", "build", "test", "deploy"],
    ),
])
def test_resolve(tasks, edges, expected):
    assert resolver.resolve(tasks, edges) == expected


@pytest.mark.parametrize("tasks,edges,cycle", [
    # Self-cycle
    (["a"], [("a", "a")], ("a", "a")),
    # Two-node cycle
    (["a", "b"], [("a", "b"), ("b", "a")], ("a", "b", "a")),
    # Four-node cycle
    (
        ["a", "b", "c", "d"],
        [("a", "b"), ("b", "c"), ("c", "d"), ("d", "a")],
        ("a", "b", "c", "d", "a"),
    ),
    # Cycle below an acyclic prefix reports only the loop
    (["x", "a", "b"], [("x", "a"), ("a", "b"), ("b", "a")], ("a", "b", "a")),
])
def test_resolve_detects_cycles(tasks, edges, cycle):
    with pytest.raises(CyclicDependencyError) as exc:
        resolver.resolve(tasks, edges)
    assert exc.value.cycle == cycle
    assert "cyclic dependency" in str(exc.value)
    assert " -> ".join(cycle) in str(exc.value)


def test_resolve_unknown_task():
    with pytest.raises(UnknownTaskError):
        resolver.resolve(["a"], [("a", "b")])


def test_resolve_graph_is_repeatable():
    graph = build_graph(["a", "b", "c", "d"], [("a", "b"), ("c", "d"), ("b", "d")])
    first = resolver.resolve_graph(graph)
    second = resolver.resolve_graph(graph)
    assert first == second == ["d", "b", "a", "c"]


def test_resolve_graph_after_cycle_leaves_graph_usable():
    graph = build_graph(["a", "b"], [("a", "b"), ("b", "a")])
    for _ in range(2):
        with pytest.raises(CyclicDependencyError):
            resolver.resolve_graph(graph)
    assert graph.dependencies_of("a") == ("b",)


def test_resolve_satisfies_every_edge():
    tasks = [f"t{chr(ord('a') + i)}" for i in range(20)]
    edges = [(tasks[i], tasks[j]) for i in range(20) for j in range(i + 1, 20) if (i * j) % 3 == 1]
    order = resolver.resolve(tasks, edges)
    assert sorted(order) == sorted(tasks)
    position = {task: i for i, task in enumerate(order)}
    for dependent, dependent_on in edges:
        assert position[dependent_on] < position[dependent]


def test_resolve_warns_above_task_limit(caplog):
    get_config_manager().set_max_tasks(2)
    caplog.set_level(logging.WARNING, logger="taskorder")
    assert resolver.resolve(["a", "b", "c"], []) == ["a", "b", "c"]
    assert "more than the configured limit of 2" in caplog.text


def test_resolve_within_task_limit_is_quiet(caplog):
    caplog.set_level(logging.WARNING, logger="taskorder")
    resolver.resolve(["a", "b"], [("a", "b")])
    assert "configured limit" not in caplog.text


def test_visit_state_values():
    assert [state.value for state in resolver.VisitState] == [
        "unvisited",
        "in_progress",
        "resolved",
    ]


def test_resolve_ignores_invalid_task_limit(monkeypatch, caplog):
    monkeypatch.setenv("TASKORDER_MAX_TASKS", "abc")
    caplog.set_level(logging.WARNING, logger="taskorder")
    assert resolver.resolve(["a", "b"], [("a", "b")]) == ["b", "a"]
    assert "Ignoring task limit, using 50" in caplog.text
