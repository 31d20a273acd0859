#!/usr/bin/env python3
"""
Exception types for category tree building.

Fatal errors abort the build; FileReadError is raised by the include
resolver and absorbed by the tree builder.
"""

from pathlib import Path
from typing import Optional


class DomainTreeError(Exception):
    """Base class for all category tree errors."""


class DirectoryNotFound(DomainTreeError):
    """The dataset root is missing or could not be walked."""

    def __init__(self, directory: Path, reason: Optional[str] = None):
        self.directory = Path(directory)
        message = f"Directory not found: {self.directory}"
        if reason:
            message = f"Could not scan {self.directory}: {reason}"
        super().__init__(message)


class FileReadError(DomainTreeError):
    """A category file could not be opened or decoded."""

    def __init__(self, file_path: Path, reason: str):
        self.file_path = Path(file_path)
        self.reason = reason
        super().__init__(f"Could not read {self.file_path}: {reason}")


class SerializationError(DomainTreeError):
    """The structured document could not be encoded."""


class SinkWriteError(DomainTreeError):
    """An output artifact could not be persisted."""

    def __init__(self, destination: str, reason: str):
        self.destination = destination
        self.reason = reason
        super().__init__(f"Could not write {destination}: {reason}")


class IncludeConflictError(DomainTreeError):
    """A category is included by more than one parent under the reject policy."""

    def __init__(self, child: str, previous_parent: str, new_parent: str):
        self.child = child
        self.previous_parent = previous_parent
        self.new_parent = new_parent
        super().__init__(
            f"'{child}' is included by both '{previous_parent}' and '{new_parent}'"
        )


class DatasetFetchError(DomainTreeError):
    """The upstream dataset could not be fetched."""
