"""Configuration classes for the scheduling engine."""

from enum import Enum

from pydantic import BaseModel, Field


class BackwardStrategy(str, Enum):
    """How latest windows are propagated from the deadline."""

    REVERSE_TOPOLOGICAL = "reverse_topological"  # One pass, O(V+E)
    RELAXATION = "relaxation"  # Worklist from terminal tasks, improve-if-smaller


class SchedulingConfig(BaseModel):
    """Configuration for a scheduling run."""

    backward_strategy: BackwardStrategy = BackwardStrategy.REVERSE_TOPOLOGICAL
    # Fixed deadline for the backward pass; None uses the computed horizon
    deadline: int | None = Field(default=None, ge=0)
