"""
Custom exceptions for schedule resolution.

This module defines the exceptions raised while turning task names and
dependency declarations into an execution order.

Exception Hierarchy:
    TaskorderError (base)
        └── BusinessError (user/expected errors, no stack trace)
            ├── ValidationError (input validation failures)
            │   ├── InvalidInputError (absent or malformed tasks/dependencies)
            │   │   └── MalformedDeclarationError (unparseable "a => b" text)
            │   ├── DuplicateTaskError (task declared twice)
            │   └── UnknownTaskError (edge references an undeclared task)
            ├── CyclicDependencyError (dependency graph contains a cycle)
            └── ConfigurationError (config/environment issues)

Usage Guidelines:
    - Every resolve failure is a BusinessError subclass; callers catch
      TaskorderError to handle all of them at once
    - Use structured error format: what/why/how_to_fix/context
    - The CLI prints BusinessError without a traceback

Structured Error Format:
    All error classes support optional structured information:
    - what: What went wrong (brief description)
    - why: Why it happened (root cause)
    - how_to_fix: How to resolve it (actionable steps)
    - context: Additional context (dict with relevant details)
"""

from typing import Optional, Sequence, Tuple


class TaskorderError(RuntimeError):
    """
    Base exception for all taskorder-specific errors.

    Supports structured error information:
    - what: What went wrong
    - why: Why it happened
    - how_to_fix: How to resolve it
    - context: Additional context dict
    """

    def __init__(
        self,
        message: str,
        *,
        what: str | None = None,
        why: str | None = None,
        how_to_fix: str | None = None,
        context: dict | None = None,
    ):
        """
        Initialize error with optional structured information.

        Args:
            message: Error message (used if structured info not provided)
            what: Brief description of what went wrong
            why: Root cause explanation
            how_to_fix: Actionable resolution steps
            context: Additional context dictionary
        """
        self.message = message
        self.what = what
        self.why = why
        self.how_to_fix = how_to_fix
        self.context = context or {}

        if what:
            formatted_msg = f"❌ {what}"
            if why:
                formatted_msg += f"\n\n💡 Reason: {why}"
            if how_to_fix:
                formatted_msg += f"\n\n✅ Solution: {how_to_fix}"
            if context:
                context_str = "\n".join(f"  - {k}: {v}" for k, v in context.items())
                formatted_msg += f"\n\n📝 Context:\n{context_str}"
            super().__init__(formatted_msg)
        else:
            super().__init__(message)


class BusinessError(TaskorderError):
    """
    Base exception for expected/user-facing failures.

    Bad task lists, bad declarations and impossible orderings all land here.
    They are caused by the caller's input, so they are reported without a
    stack trace.
    """

    pass


class ValidationError(BusinessError):
    """
    Validation-specific business error.

    Use this for input validation failures detected before or while the
    dependency graph is built.
    """

    pass


class ConfigurationError(BusinessError):
    """
    Configuration-specific business error.

    Example:
        >>> raise ConfigurationError("TASKORDER_MAX_TASKS must be a positive integer")
    """

    pass


class InvalidInputError(ValidationError):
    """
    The task list or the dependency list is absent or not a list of strings.

    Example:
        >>> if tasks is None:
        >>>     raise InvalidInputError("Invalid inputs: tasks is required")
    """

    pass


class MalformedDeclarationError(InvalidInputError):
    """A dependency declaration does not read ``<dependent> => <dependent_on>``."""

    def __init__(self, declaration: object, position: Optional[int] = None):
        self.declaration = declaration
        self.position = position
        context = {"declaration": repr(declaration)}
        if position is not None:
            context["position"] = position
        super().__init__(
            f"Malformed dependency declaration: {declaration!r}",
            what=f"Malformed dependency declaration: {declaration!r}",
            why="Declarations must have the form '<dependent> => <dependent_on>' "
            "where both sides are lowercase words",
            how_to_fix="Write the declaration as e.g. 'build => fetch'",
            context=context,
        )


class DuplicateTaskError(ValidationError):
    """The same task identity was declared more than once."""

    def __init__(self, task: str, first_index: int, second_index: int):
        self.task = task
        super().__init__(
            f"Duplicate task: {task}",
            what=f"Duplicate task '{task}'",
            why="Task names identify tasks and must be unique",
            how_to_fix=f"Remove the repeated '{task}' from the task list",
            context={"task": task, "first_index": first_index, "second_index": second_index},
        )


class UnknownTaskError(ValidationError):
    """A dependency edge names a task that is not in the task list."""

    def __init__(self, task: str, edge: Tuple[str, str]):
        self.task = task
        self.edge = tuple(edge)
        super().__init__(
            f"Unknown task: {task}",
            what=f"Unknown task '{task}'",
            why=f"Dependency '{edge[0]} => {edge[1]}' references a task that was never declared",
            how_to_fix=f"Add '{task}' to the task list or remove the dependency",
            context={"task": task, "dependency": f"{edge[0]} => {edge[1]}"},
        )


class CyclicDependencyError(BusinessError):
    """
    The dependency graph contains a cycle, so no valid order exists.

    ``cycle`` holds the offending path with the repeated task at both ends,
    e.g. ``("a", "b", "a")``.
    """

    def __init__(self, cycle: Sequence[str]):
        self.cycle = tuple(cycle)
        path = " -> ".join(self.cycle)
        super().__init__(
            f"Cyclic dependency detected: {path}",
            what="Error - this is a cyclic dependency",
            why=f"Circular dependency detected: {path}. "
            "Tasks cannot have circular dependencies as this would cause infinite loops.",
            how_to_fix="Remove one of the dependencies along the cycle",
            context={"cycle": path},
        )
