"""File persistence for generated documentation.

FileStorage writes Markdown, OpenAPI JSON and index files below the output
directory. Parent directories are created on demand and existing files are
overwritten.
"""

import logging
import os

from .errors import StorageError

logger = logging.getLogger(__name__)


class FileStorage:
    """Writes text content to the filesystem.

    Example:
        >>> storage = FileStorage()
        >>> storage.save_file("# Places API", "docs/search/places-api.md")
    """

    def save_file(self, content: str, file_path: str) -> None:
        """Write content to file_path, creating missing parent directories.

        Args:
            content: Text to write (UTF-8)
            file_path: Destination path; an existing file is overwritten

        Raises:
            StorageError: If the directory cannot be created or the write fails
        """
        parent_dir = os.path.dirname(file_path)
        if parent_dir:
            self.ensure_directory_exists(parent_dir)

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except PermissionError:
            raise StorageError(file_path, 'write', 'Permission denied')
        except OSError as e:
            raise StorageError(file_path, 'write', str(e)) from e

        logger.info(f"Saved: {file_path}")

    def ensure_directory_exists(self, dir_path: str) -> None:
        """Create dir_path and any missing parents.

        Raises:
            StorageError: If the directory cannot be created
        """
        try:
            os.makedirs(dir_path, exist_ok=True)
        except OSError as e:
            raise StorageError(dir_path, 'create_directory', str(e)) from e
