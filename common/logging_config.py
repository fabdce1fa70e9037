import logging
import os
import sys
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _build_formatter(job_id: Optional[int] = None) -> logging.Formatter:
    """Build the shared log formatter, tagging records with a job id if given."""
    if job_id is not None:
        return logging.Formatter(
            f'%(asctime)s - %(name)s - %(levelname)s - [job:{job_id}] - %(message)s',
            datefmt=DATE_FORMAT
        )
    return logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None,
    job_id: Optional[int] = None
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the component (e.g., 'worker')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO
        job_id: Optional job ID to include in log format

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', 'INFO')

    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(job_id))

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str, job_id: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)
        job_id: Optional job ID for tracing a single job

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if job_id is not None:
        set_job_id(logger, job_id)

    return logger


def set_job_id(logger: logging.Logger, job_id: Optional[int]) -> None:
    """
    Update logger handlers to include the job ID in format.

    Args:
        logger: Logger instance to update
        job_id: Job ID to include, or None to restore the plain format
    """
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setFormatter(_build_formatter(job_id))
