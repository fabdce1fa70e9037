"""Remove source files and directories."""

import logging
import shutil
from pathlib import Path
from typing import Optional, Sequence

from worker.exceptions import FileSystemOperationError, PathNotFoundError


class RemoveAction:
    """
    Delete each source path: files directly, directories recursively.

    Stops on the first failure; paths removed before it stay removed.
    """

    def __init__(self, source_paths: Sequence[str], logger: Optional[logging.Logger] = None):
        self.source_paths = tuple(source_paths)
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def execute(self) -> None:
        """
        Remove every source path.

        Raises:
            PathNotFoundError: If a path is neither a file nor a directory
            FileSystemOperationError: If a deletion fails
        """
        for source_path in self.source_paths:
            path = Path(source_path)

            if path.is_file():
                try:
                    path.unlink()
                except OSError as e:
                    raise FileSystemOperationError(
                        f'Could not remove path "{source_path}": {e}'
                    ) from e
                self.logger.debug(f"Removed file: {source_path}")
            elif path.is_dir():
                try:
                    if path.is_symlink():
                        path.unlink()
                    else:
                        shutil.rmtree(path)
                except OSError as e:
                    raise FileSystemOperationError(
                        f'Could not remove directory "{source_path}": {e}'
                    ) from e
                self.logger.debug(f"Removed directory: {source_path}")
            else:
                raise PathNotFoundError(f'No such file or directory: "{source_path}"')
