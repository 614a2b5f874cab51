"""Typed exceptions for filesystem operations."""

from typing import Optional

from gis_docs.scraper.errors import DocsParserError


class StorageError(DocsParserError):
    """Raised when filesystem operations fail (mkdir, read, write, permissions)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
