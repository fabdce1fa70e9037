"""Configuration settings for the file system worker."""

import os
from common.constants import DEFAULT_WORKER_NAME


WORKER_NAME = os.environ.get("FS_WORKER_NAME", DEFAULT_WORKER_NAME)

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
