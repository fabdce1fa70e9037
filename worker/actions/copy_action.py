"""Copy source files into a single output directory."""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional, Sequence

from worker.exceptions import FileSystemOperationError


class CopyAction:
    """
    Copy each source file into the output directory, flattening source folders.

    Stops on the first failure; files copied before it are left in place.
    """

    def __init__(
        self,
        source_paths: Sequence[str],
        output_directory: str,
        logger: Optional[logging.Logger] = None
    ):
        self.source_paths = tuple(source_paths)
        self.output_directory = output_directory
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def execute(self) -> List[str]:
        """
        Copy every source path.

        Returns:
            Destination paths, in source order

        Raises:
            FileSystemOperationError: If a directory cannot be created or a file cannot be copied
        """
        output_files = []

        for source_path in self.source_paths:
            output_path = self._destination_for(source_path)
            self.logger.info(f"Copy {source_path} --> {output_path}")

            parent = Path(output_path).parent
            try:
                parent.mkdir(parents=True, exist_ok=True)
            except (OSError, ValueError) as e:
                raise FileSystemOperationError(
                    f'Could not create directory "{parent}": {e}'
                ) from e

            try:
                shutil.copyfile(source_path, output_path)
            except (OSError, ValueError) as e:
                raise FileSystemOperationError(
                    f'Could not copy "{source_path}" to "{output_path}": {e}'
                ) from e

            output_files.append(output_path)

        return output_files

    def _destination_for(self, source_path: str) -> str:
        filename = os.path.basename(os.path.normpath(source_path))
        if not filename or filename in (os.curdir, os.pardir):
            raise FileSystemOperationError(
                f'Could not derive a file name from source path "{source_path}"'
            )
        return os.path.join(self.output_directory, filename)
