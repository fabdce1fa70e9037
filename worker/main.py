"""Entry point for the file system worker.
Reads job messages from files or stdin and prints each job result.
"""

import sys
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from common.logging_config import setup_logging
from worker.config import LOG_LEVEL, WORKER_NAME
from worker.exceptions import InvalidMessageError
from worker.message import WORKER_LOGGER, process_message


def iter_messages(paths: List[str], stream: TextIO) -> Iterator[str]:
    """
    Yield raw job messages, one per file, or one per non-blank stdin line.
    """
    if paths:
        for path in paths:
            yield Path(path).read_text(encoding='utf-8')
    else:
        for line in stream:
            if line.strip():
                yield line


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    """Entry point for the worker. Returns the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    debug = '--debug' in args
    if debug:
        args.remove('--debug')

    logger = setup_logging(WORKER_LOGGER, log_level='DEBUG' if debug else LOG_LEVEL)
    logger.info(f"Starting {WORKER_NAME}")

    failures = 0
    try:
        for message in iter_messages(args, stdin):
            try:
                result = process_message(message)
            except InvalidMessageError as e:
                logger.error(f"Skipping message: {e}")
                failures += 1
                continue

            if not result.is_completed:
                failures += 1
                logger.warning(f"Job {result.job_id} failed: {result.message}")

            stdout.write(result.to_json().decode('utf-8') + "\n")
    except OSError as e:
        logger.error(f"Could not read job message: {e}")
        return 1
    finally:
        logger.info(f"{WORKER_NAME} exiting")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
