"""
taskorder - dependency ordering for task schedulers

Computes an execution order for named tasks from "a => b" declarations
("a depends on b") and rejects duplicate, unknown and cyclic dependencies.

Core modules:
- core.scheduler: resolve_schedule entry point
- core.dependency: declaration parser, dependency graph, resolver
- core.errors: typed error hierarchy
- core.config_manager: environment-backed configuration

Optional:
- cli: command line interface [cli]
"""

__version__ = "0.1.0"

# Lazy imports keep `import taskorder` cheap for the CLI version command
__all__ = [
    "resolve_schedule",
    "resolve",
    "build_graph",
    "DependencyGraph",
    "Edge",
    "TaskorderError",
    "InvalidInputError",
    "MalformedDeclarationError",
    "DuplicateTaskError",
    "UnknownTaskError",
    "CyclicDependencyError",
    "__version__",
]


def __getattr__(name):
    """Lazy import of the public API on first access"""

    if name == "resolve_schedule":
        from taskorder.core.scheduler import resolve_schedule

        return resolve_schedule

    if name in ("resolve", "build_graph", "DependencyGraph", "Edge"):
        from taskorder.core import dependency

        return getattr(dependency, name)

    if name in (
        "TaskorderError",
        "InvalidInputError",
        "MalformedDeclarationError",
        "DuplicateTaskError",
        "UnknownTaskError",
        "CyclicDependencyError",
    ):
        from taskorder.core import errors

        return getattr(errors, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
