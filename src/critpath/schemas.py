"""Pydantic schemas for project YAML data."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskSchema(BaseModel):
    """Schema for one task entry."""

    model_config = ConfigDict(extra="forbid")

    duration: Any  # Checked by TaskSpec.create so errors carry the task ID
    depends_on: list[str] = Field(default_factory=list)

    @field_validator("depends_on", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Accept a single ID or a list of IDs."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]


class ProjectSchema(BaseModel):
    """Schema for the whole project file."""

    model_config = ConfigDict(extra="forbid")

    name: str = "Project"
    tasks: dict[str, TaskSchema] = Field(default_factory=dict)

    @field_validator("tasks", mode="before")
    @classmethod
    def coerce_keys(cls, v: Any) -> Any:
        """YAML turns keys like ``1`` into ints; task IDs are always strings."""
        if not isinstance(v, dict):
            return v
        tasks: dict[str, Any] = {}
        for key, value in v.items():  # type: ignore[misc]
            task_id = str(key)  # type: ignore[arg-type]
            if task_id in tasks:
                raise ValueError(f"Duplicate task ID: {task_id}")
            tasks[task_id] = value
        return tasks
