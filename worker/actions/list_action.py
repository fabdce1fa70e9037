"""List the direct entries of source directories."""

import logging
import os
from typing import List, Optional, Sequence

from worker.exceptions import FileSystemOperationError


class ListAction:
    """
    List the entries of each source directory, in filesystem order.

    Paths that are not directories are skipped with a warning.
    """

    def __init__(self, source_paths: Sequence[str], logger: Optional[logging.Logger] = None):
        self.source_paths = tuple(source_paths)
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def execute(self) -> List[str]:
        """
        List every source directory.

        Returns:
            Full entry paths, directory by directory

        Raises:
            FileSystemOperationError: If a directory cannot be read, or holds an entry
                whose path is not valid UTF-8
        """
        listing = []

        for source_path in self.source_paths:
            self.logger.info(f"List {source_path}")
            if not os.path.isdir(source_path):
                self.logger.warning(f"{source_path} is not a directory")
                continue

            listing.extend(self._read_entries(source_path))

        return listing

    def _read_entries(self, directory: str) -> List[str]:
        entries = []
        try:
            with os.scandir(directory) as iterator:
                for entry in iterator:
                    entries.append(_checked_entry_path(directory, entry.path))
        except OSError as e:
            raise FileSystemOperationError(
                f'Could not list directory "{directory}": {e}'
            ) from e
        return entries


def _checked_entry_path(directory: str, entry_path: str) -> str:
    # Undecodable names come back from the OS with surrogate escapes
    try:
        entry_path.encode('utf-8')
    except UnicodeEncodeError as e:
        raise FileSystemOperationError(
            f'Could not represent an entry of directory "{directory}" as text: {e}'
        ) from e
    return entry_path
