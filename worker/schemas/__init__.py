"""Pydantic schemas for job messages."""

from worker.schemas.job import (
    Job,
    JobParameters,
    Parameter,
    Requirements,
)

__all__ = [
    "Job",
    "JobParameters",
    "Parameter",
    "Requirements",
]
