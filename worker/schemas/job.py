"""Pydantic schemas for incoming job messages."""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from common.constants import (
    ACTION_PARAMETER,
    MISSING_ACTION_MESSAGE,
    OUTPUT_DIRECTORY_PARAMETER,
    REQUIREMENTS_PARAMETER,
    SOURCE_PATHS_PARAMETER,
)
from worker.exceptions import MissingParameterError


class Requirements(BaseModel):
    """Paths that must exist before a job may run."""
    paths: List[str] = []


class _ParameterBase(BaseModel):
    id: str

    def resolved(self) -> Any:
        """Effective value: the explicit value, falling back to the default."""
        value = getattr(self, "value", None)
        if value is not None:
            return value
        return getattr(self, "default", None)


class StringParameter(_ParameterBase):
    type: Literal["string"]
    value: Optional[str] = None
    default: Optional[str] = None


class PathsParameter(_ParameterBase):
    type: Literal["paths"]
    value: Optional[List[str]] = None
    default: Optional[List[str]] = None


class ArrayOfStringsParameter(_ParameterBase):
    type: Literal["array_of_strings"]
    value: Optional[List[str]] = None
    default: Optional[List[str]] = None


class IntegerParameter(_ParameterBase):
    type: Literal["integer"]
    value: Optional[int] = None
    default: Optional[int] = None


class BooleanParameter(_ParameterBase):
    type: Literal["boolean"]
    value: Optional[bool] = None
    default: Optional[bool] = None


class RequirementsParameter(_ParameterBase):
    type: Literal["requirements"]
    value: Optional[Requirements] = None
    default: Optional[Requirements] = None


Parameter = Annotated[
    Union[
        StringParameter,
        PathsParameter,
        ArrayOfStringsParameter,
        IntegerParameter,
        BooleanParameter,
        RequirementsParameter,
    ],
    Field(discriminator="type"),
]


class Job(BaseModel):
    """A job message: an identifier and its typed parameters."""
    job_id: int
    parameters: List[Parameter] = []

    def get_parameter(self, parameter_id: str) -> Optional[_ParameterBase]:
        for parameter in self.parameters:
            if parameter.id == parameter_id:
                return parameter
        return None

    def get_string_parameter(self, parameter_id: str) -> Optional[str]:
        parameter = self.get_parameter(parameter_id)
        if isinstance(parameter, StringParameter):
            return parameter.resolved()
        return None

    def get_paths_parameter(self, parameter_id: str) -> Optional[List[str]]:
        parameter = self.get_parameter(parameter_id)
        if isinstance(parameter, (PathsParameter, ArrayOfStringsParameter)):
            return parameter.resolved()
        return None

    def get_requirements(self) -> Requirements:
        parameter = self.get_parameter(REQUIREMENTS_PARAMETER)
        if isinstance(parameter, RequirementsParameter) and parameter.resolved() is not None:
            return parameter.resolved()
        return Requirements()


class JobParameters(BaseModel):
    """Parameters resolved from a job, as consumed by the dispatcher."""
    action: str
    source_paths: Optional[List[str]] = None
    output_directory: Optional[str] = None

    @classmethod
    def from_job(cls, job: Job) -> "JobParameters":
        """
        Resolve the dispatcher parameters from a job's parameter list.

        Raises:
            MissingParameterError: If the job carries no action selector
        """
        action = job.get_string_parameter(ACTION_PARAMETER)
        if action is None:
            raise MissingParameterError(MISSING_ACTION_MESSAGE)

        return cls(
            action=action,
            source_paths=job.get_paths_parameter(SOURCE_PATHS_PARAMETER),
            output_directory=job.get_string_parameter(OUTPUT_DIRECTORY_PARAMETER),
        )
