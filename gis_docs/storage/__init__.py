"""Filesystem persistence for converted documentation."""

from .errors import StorageError
from .file_storage import FileStorage

__all__ = [
    'FileStorage',
    'StorageError',
]
