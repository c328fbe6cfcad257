"""
Core scheduling package: errors, configuration, dependency graph and resolver.
"""

from taskorder.core.errors import (
    TaskorderError,
    BusinessError,
    ValidationError,
    ConfigurationError,
    InvalidInputError,
    MalformedDeclarationError,
    DuplicateTaskError,
    UnknownTaskError,
    CyclicDependencyError,
)
from taskorder.core.scheduler import resolve_schedule

__all__ = [
    "resolve_schedule",
    "TaskorderError",
    "BusinessError",
    "ValidationError",
    "ConfigurationError",
    "InvalidInputError",
    "MalformedDeclarationError",
    "DuplicateTaskError",
    "UnknownTaskError",
    "CyclicDependencyError",
]
