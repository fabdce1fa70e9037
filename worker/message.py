"""Job message handling: parse, check requirements, resolve parameters, dispatch."""

import logging
import os
from typing import Union

from pydantic import ValidationError

from common.constants import INVALID_MESSAGE_MESSAGE
from common.logging_config import set_job_id
from common.protocol import JobResult
from worker import dispatcher
from worker.exceptions import InvalidMessageError, RequirementsNotMetError, WorkerException
from worker.schemas.job import Job, JobParameters

logger = logging.getLogger(__name__)

WORKER_LOGGER = "worker"


def parse_message(message: Union[str, bytes]) -> Job:
    """
    Parse a raw job message.

    Raises:
        InvalidMessageError: If the message is not a valid job
    """
    try:
        return Job.model_validate_json(message)
    except ValidationError as e:
        logger.error(f"Invalid job message: {e}")
        raise InvalidMessageError(INVALID_MESSAGE_MESSAGE) from e


def check_requirements(job: Job) -> None:
    """
    Ensure every required path of a job exists.

    Raises:
        RequirementsNotMetError: On the first missing path
    """
    for path in job.get_requirements().paths:
        if not os.path.exists(path):
            raise RequirementsNotMetError(f"Requirement not met, missing path: {path}")


def process_message(message: Union[str, bytes]) -> JobResult:
    """
    Process one job message end to end.

    Args:
        message: Raw JSON job message

    Returns:
        Job result, marked completed or failed

    Raises:
        InvalidMessageError: If the message cannot be parsed into a job
    """
    job = parse_message(message)

    worker_logger = logging.getLogger(WORKER_LOGGER)
    set_job_id(worker_logger, job.job_id)
    try:
        logger.debug(f"Received job: {job}")
        return _process_job(job)
    finally:
        set_job_id(worker_logger, None)


def _process_job(job: Job) -> JobResult:
    job_result = JobResult(job_id=job.job_id)
    try:
        check_requirements(job)
        parameters = JobParameters.from_job(job)
    except WorkerException as e:
        logger.error(f"Job {job.job_id} rejected: {e}")
        job_result.mark_failed(str(e))
        return job_result

    return dispatcher.process(parameters.action, parameters, job_result)
