"""Domain models for task definitions."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskItem(BaseModel):
    """One selectable entry loaded from a task file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Label shown by the launcher")
    # Visible only when this command exits 0. Evaluated with ``sh -c`` every
    # time the source is pulled.
    show_if: Optional[str] = Field(
        default=None,
        description="Shell predicate gating visibility; omit for always visible",
    )
    command: str = Field(..., description="Shell command run when the task is selected")


class TaskFile(BaseModel):
    """Schema of a single task file: a repeated ``[[task]]`` table."""

    task: List[TaskItem]
