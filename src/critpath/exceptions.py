"""Custom exceptions for critpath."""


class CritpathError(Exception):
    """Base exception for all critpath errors."""

    pass


class ValidationError(CritpathError):
    """Raised when project input fails validation."""

    pass


class DuplicateTaskIDError(ValidationError):
    """Raised when a task ID collides with a task already in the project."""

    pass


class UnknownDependencyError(ValidationError):
    """Raised when a task depends on an ID that does not exist."""

    pass


class CyclicDependencyError(ValidationError):
    """Raised when the dependency graph cannot be linearized."""

    def __init__(self, message: str, task_ids: list[str] | None = None):
        super().__init__(message)
        self.task_ids = task_ids or []


class InvalidDurationError(ValidationError):
    """Raised when a duration is negative or not an integer."""

    pass


class ParseError(CritpathError):
    """Raised when YAML parsing fails."""

    pass


class UnknownDatasetError(CritpathError):
    """Raised when a predefined dataset name is not known."""

    pass


class SchedulingError(CritpathError):
    """Raised when a scheduling step is run out of order."""

    pass


class InfeasibleScheduleError(SchedulingError):
    """Raised when the deadline cannot be met (negative slack or start before zero)."""

    pass
