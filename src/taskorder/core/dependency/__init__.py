# Dependency module exports
from .parser import (
    Edge,
    is_task_name,
    parse_declaration,
    parse_declarations,
)
from .graph import (
    DependencyGraph,
    build_graph,
)
from .resolver import (
    VisitState,
    resolve,
    resolve_graph,
)

__all__ = [
    # Parsing
    "Edge",
    "is_task_name",
    "parse_declaration",
    "parse_declarations",
    # Graph
    "DependencyGraph",
    "build_graph",
    # Resolution
    "VisitState",
    "resolve",
    "resolve_graph",
]
