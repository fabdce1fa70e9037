"""Shared data type definitions (JobStatus)."""

from enum import Enum


class JobStatus(str, Enum):
    """
    Lifecycle status of a job result.
    """
    INITIALIZED = "initialized"
    COMPLETED = "completed"
    ERROR = "error"
