"""
Action dispatcher.

Turns an action kind and its resolved parameters into a concrete action,
runs it, and records the outcome on the job result.
"""

import logging
from typing import Optional, Union

from common.constants import (
    MISSING_COPY_SOURCES_MESSAGE,
    MISSING_OUTPUT_DIRECTORY_MESSAGE,
    MISSING_REMOVE_SOURCES_MESSAGE,
)
from common.protocol import JobResult
from worker.actions import Action, ActionKind, CopyAction, ListAction, RemoveAction
from worker.exceptions import MissingParameterError, WorkerException
from worker.schemas.job import JobParameters

logger = logging.getLogger(__name__)


def build_action(
    kind: Union[ActionKind, str],
    parameters: JobParameters,
    action_logger: Optional[logging.Logger] = None
) -> Action:
    """
    Construct the action matching a kind.

    Args:
        kind: Action kind, or its selector string
        parameters: Resolved job parameters
        action_logger: Logger handed to the action (defaults to the action module logger)

    Returns:
        Action ready to execute

    Raises:
        UnknownActionError: If the selector names no known action
        MissingParameterError: If a parameter required by the action is absent
    """
    if not isinstance(kind, ActionKind):
        kind = ActionKind.from_selector(kind)

    if kind == ActionKind.COPY:
        if parameters.output_directory is None:
            raise MissingParameterError(MISSING_OUTPUT_DIRECTORY_MESSAGE)
        if not parameters.source_paths:
            raise MissingParameterError(MISSING_COPY_SOURCES_MESSAGE)
        return CopyAction(parameters.source_paths, parameters.output_directory, logger=action_logger)

    if kind == ActionKind.LIST:
        return ListAction(parameters.source_paths or [], logger=action_logger)

    if not parameters.source_paths:
        raise MissingParameterError(MISSING_REMOVE_SOURCES_MESSAGE)
    return RemoveAction(parameters.source_paths, logger=action_logger)


def process(
    kind: Union[ActionKind, str],
    parameters: JobParameters,
    job_result: JobResult,
    action_logger: Optional[logging.Logger] = None
) -> JobResult:
    """
    Run one action and record its outcome.

    Args:
        kind: Action kind, or its selector string
        parameters: Resolved job parameters
        job_result: Result sink for the job
        action_logger: Logger handed to the action

    Returns:
        The job result, marked completed or failed
    """
    try:
        action = build_action(kind, parameters, action_logger=action_logger)
        output_paths = action.execute()
    except WorkerException as e:
        logger.error(
            f"Job {job_result.job_id} failed [action={getattr(kind, 'value', kind)}]: {e}"
        )
        job_result.mark_failed(str(e))
        return job_result

    if output_paths is not None:
        job_result.attach_destination_paths(output_paths)
    job_result.mark_completed()

    logger.info(
        f"Job {job_result.job_id} completed "
        f"[action={getattr(kind, 'value', kind)}, outputs={len(job_result.destination_paths)}]"
    )
    return job_result
