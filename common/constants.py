"""Project-wide constants (parameter identifiers, fixed failure messages)."""

ACTION_PARAMETER: str = "action"
SOURCE_PATHS_PARAMETER: str = "source_paths"
OUTPUT_DIRECTORY_PARAMETER: str = "output_directory"
REQUIREMENTS_PARAMETER: str = "requirements"

MISSING_OUTPUT_DIRECTORY_MESSAGE: str = "Could not copy files without output directory."
MISSING_COPY_SOURCES_MESSAGE: str = "Could not copy files without input sources."
MISSING_REMOVE_SOURCES_MESSAGE: str = "Could not remove empty source files."
MISSING_ACTION_MESSAGE: str = "missing field `action`"
INVALID_MESSAGE_MESSAGE: str = "bad input message"

DEFAULT_WORKER_NAME: str = "file_system_worker"
