"""Custom exception types used across the project."""


class CrudeProfilerError(Exception):
    """Base exception for the project."""


class StatePoisonedError(CrudeProfilerError):
    """Raised when accounting state was left inconsistent by an earlier failure."""


class StackUnderflowError(CrudeProfilerError):
    """Raised when a task is ended while no task is active."""


class GuardOrderError(CrudeProfilerError):
    """Raised when a guard is used while it is not the innermost active task."""


class ConfigurationError(CrudeProfilerError):
    """Raised when configuration is invalid or incomplete."""
