"""
Dependency declaration parsing

Turns ``"a => b"`` declarations into ``Edge`` pairs. ``a`` is the dependent
task and ``b`` the task it depends on, so ``b`` must be scheduled first.
Whitespace around and inside the declaration is ignored.
"""

import re
from typing import Iterable, List, NamedTuple

from taskorder.core.errors import MalformedDeclarationError

TASK_NAME_PATTERN = re.compile(r"[a-z]+")

_DECLARATION_PATTERN = re.compile(r"^\s*([a-z]+)\s*=>\s*([a-z]+)\s*$")


class Edge(NamedTuple):
    """``dependent`` must be scheduled after ``dependent_on``."""

    dependent: str
    dependent_on: str


def is_task_name(value: object) -> bool:
    """Return True if value is a lowercase-word task name."""
    return isinstance(value, str) and TASK_NAME_PATTERN.fullmatch(value) is not None


def parse_declaration(declaration: str, position: int | None = None) -> Edge:
    """
    Parse a single ``<dependent> => <dependent_on>`` declaration.

    Args:
        declaration: Raw declaration text, e.g. ``"a => b"`` or ``"c=>d"``
        position: Index of the declaration in its list, used in error reports

    Returns:
        Edge(dependent, dependent_on)

    Raises:
        MalformedDeclarationError: If the text does not match the grammar
    """
    if not isinstance(declaration, str):
        raise MalformedDeclarationError(declaration, position)
    match = _DECLARATION_PATTERN.match(declaration)
    if match is None:
        raise MalformedDeclarationError(declaration, position)
    return Edge(match.group(1), match.group(2))


def parse_declarations(declarations: Iterable[str]) -> List[Edge]:
    """Parse declarations, preserving their order."""
    return [parse_declaration(text, position) for position, text in enumerate(declarations)]


__all__ = ["Edge", "TASK_NAME_PATTERN", "is_task_name", "parse_declaration", "parse_declarations"]
