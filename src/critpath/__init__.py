"""critpath - Critical Path Method scheduling."""

from .exceptions import (
    CritpathError,
    CyclicDependencyError,
    DuplicateTaskIDError,
    InfeasibleScheduleError,
    InvalidDurationError,
    ParseError,
    SchedulingError,
    UnknownDatasetError,
    UnknownDependencyError,
    ValidationError,
)
from .models import Project, Task, TaskSpec, TimeWindow
from .scheduler import BackwardStrategy, SchedulingConfig, SchedulingService, ScheduleResult

__version__ = "0.1.0"

__all__ = [
    "Project",
    "Task",
    "TaskSpec",
    "TimeWindow",
    "SchedulingService",
    "SchedulingConfig",
    "BackwardStrategy",
    "ScheduleResult",
    "CritpathError",
    "ValidationError",
    "DuplicateTaskIDError",
    "UnknownDependencyError",
    "CyclicDependencyError",
    "InvalidDurationError",
    "ParseError",
    "UnknownDatasetError",
    "SchedulingError",
    "InfeasibleScheduleError",
]
