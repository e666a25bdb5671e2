#!/usr/bin/env python3
"""
probe.py
-------------------
Describe files and directories without reading them.

A probe turns a ``PathContext`` into an immutable descriptor carrying what
later stages need to decide whether and how to load the path: name,
location, size, content type and access grants. Only stat-level calls are
made here.

Classes:
    PathContext: A path to probe (``EMPTY_PATH`` marks "nothing to probe")
    Grant: Access bits of a path
    FileDescriptor: Snapshot of a regular file
    DirectoryDescriptor: Snapshot of a directory and its entries
    FileProbe: Builds FileDescriptors
    DirectoryProbe: Builds DirectoryDescriptors
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import mimetypes
import os
from dataclasses import dataclass
from typing import Optional, Tuple

# --- Local imports ---
from blogmeta.core.logging_manager import MetadataLogger, safe_logger

UNKNOWN_CONTENT_TYPE = "unknown"


@dataclass(frozen=True)
class PathContext:
    """A path handed to a probe."""

    path: str

    @property
    def is_empty(self) -> bool:
        return self.path == ""


EMPTY_PATH = PathContext("")


def _probe_access(path: str, mode: int) -> bool:
    try:
        return os.access(path, mode)
    except OSError:
        return False


@dataclass(frozen=True)
class Grant:
    """
    Access bits of a path, each probed independently.

    Attributes:
        executable: Path may be executed (or traversed, for directories)
        readable: Path may be read
        writable: Path may be written
    """

    executable: bool = False
    readable: bool = False
    writable: bool = False

    @classmethod
    def probe(cls, path: str) -> Grant:
        """Probe a path; a failing check reports that bit as False."""
        return cls(
            executable=_probe_access(path, os.X_OK),
            readable=_probe_access(path, os.R_OK),
            writable=_probe_access(path, os.W_OK),
        )


@dataclass(frozen=True)
class FileDescriptor:
    """
    Snapshot of a regular file.

    Attributes:
        content_type: MIME type guessed from the name, or ``"unknown"``
        directory_path: Folder containing the file
        extension: Last extension including the dot (``".md"``)
        grant: Access bits
        name: File name
        size: Size in bytes, ``-1`` when the file is not readable
    """

    content_type: str
    directory_path: str
    extension: str
    grant: Grant
    name: str
    size: int

    @property
    def full_path(self) -> str:
        return os.path.join(self.directory_path, self.name)


@dataclass(frozen=True)
class DirectoryDescriptor:
    """
    Snapshot of a directory.

    Attributes:
        file_names: Entry names, sorted
        grant: Access bits
        name: Directory name
        path: Directory path
        size: Size reported by stat
    """

    file_names: Tuple[str, ...]
    grant: Grant
    name: str
    path: str
    size: int

    @property
    def file_count(self) -> int:
        return len(self.file_names)


class FileProbe:
    """Build FileDescriptors for existing regular files."""

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        self.logger = logger

    def supports(self, path_context: PathContext) -> bool:
        """Check that the path is non-empty and names an existing file."""
        return not path_context.is_empty and os.path.isfile(path_context.path)

    def load(self, path_context: PathContext) -> FileDescriptor:
        """
        Describe a file.

        Args:
            path_context: Path to an existing file

        Returns:
            Immutable descriptor of the file
        """
        path = path_context.path
        grant = Grant.probe(path)
        size = os.path.getsize(path) if grant.readable else -1
        content_type, _ = mimetypes.guess_type(path)
        directory_path, name = os.path.split(path)

        descriptor = FileDescriptor(
            content_type=content_type or UNKNOWN_CONTENT_TYPE,
            directory_path=directory_path,
            extension=os.path.splitext(name)[1],
            grant=grant,
            name=name,
            size=size,
        )
        safe_logger(self.logger).log_debug(
            "Probed file", {"path": path, "size": size, "readable": grant.readable}
        )
        return descriptor


class DirectoryProbe:
    """Build DirectoryDescriptors for existing directories."""

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        self.logger = logger

    def supports(self, path_context: PathContext) -> bool:
        return not path_context.is_empty and os.path.isdir(path_context.path)

    def load(self, path_context: PathContext) -> DirectoryDescriptor:
        """List a directory's entries without reading them."""
        path = path_context.path
        stat = os.stat(path)
        file_names = tuple(sorted(os.listdir(path)))
        safe_logger(self.logger).log_debug(
            "Probed directory", {"path": path, "entries": len(file_names)}
        )
        return DirectoryDescriptor(
            file_names=file_names,
            grant=Grant.probe(path),
            name=os.path.basename(os.path.normpath(path)),
            path=path,
            size=stat.st_size,
        )
