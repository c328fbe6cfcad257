"""
Request/response models for schedule resolution

Used by the CLI to load plan files and to emit JSON output.
"""

from typing import List

from pydantic import BaseModel, Field

from taskorder.core.scheduler import resolve_schedule


class ScheduleResult(BaseModel):
    order: List[str] = Field(description="Task names in execution order")


class ScheduleRequest(BaseModel):
    tasks: List[str] = Field(description="Task names in declaration order")
    dependencies: List[str] = Field(
        default_factory=list,
        description="Declarations of the form '<dependent> => <dependent_on>'",
    )

    def resolve(self) -> ScheduleResult:
        """Resolve this request into an execution order."""
        return ScheduleResult(order=resolve_schedule(self.tasks, self.dependencies))


__all__ = ["ScheduleRequest", "ScheduleResult"]
