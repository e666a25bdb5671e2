#!/usr/bin/env python3
"""
file_loader.py
-------------------
Read described files into memory.

Two strategies share one ``supports`` rule: the file must be readable and
writable, have a name and a folder, and not be empty. The asynchronous
strategy also needs a positive timeout and runs the read in a worker thread
raced against it.

Usage:
    loader = create_file_loader(options)
    if loader.supports(descriptor):
        file_object = loader.load(descriptor)            # sync
        file_object = await loader.load(descriptor)      # async
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Optional

# --- Local imports ---
from blogmeta.core.exceptions import LoadTimeoutError
from blogmeta.core.logging_manager import MetadataLogger, safe_logger
from blogmeta.core.options import GenerateOptions
from blogmeta.loaders.probe import FileDescriptor, Grant


@dataclass(frozen=True)
class FileObject:
    """
    Raw content of a loaded file.

    Attributes:
        content: File bytes
        content_type: MIME type from the descriptor
        name: File name
        grant: Access bits from the descriptor
    """

    content: bytes
    content_type: str
    name: str
    grant: Grant

    def text(self, encoding: str = "utf-8") -> str:
        return self.content.decode(encoding)


def _read_file(descriptor: FileDescriptor) -> FileObject:
    content = Path(descriptor.full_path).read_bytes()
    return FileObject(
        content=content,
        content_type=descriptor.content_type,
        name=descriptor.name,
        grant=descriptor.grant,
    )


class FileLoader(ABC):
    """Base class for file loading strategies."""

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        self.logger = logger

    def supports(self, descriptor: Any) -> bool:
        """Check the descriptor names a non-empty file we may read and write."""
        if not isinstance(descriptor, FileDescriptor):
            return False
        return (
            bool(descriptor.directory_path)
            and bool(descriptor.name)
            and descriptor.size > 0
            and descriptor.grant.readable
            and descriptor.grant.writable
        )

    @abstractmethod
    def load(self, descriptor: FileDescriptor) -> Any:
        """Read the described file."""
        pass


class SyncFileLoader(FileLoader):
    """Read files on the calling thread."""

    def load(self, descriptor: FileDescriptor) -> FileObject:
        """
        Read the whole file.

        Raises:
            OSError: Any read failure, unmodified
        """
        safe_logger(self.logger).log_debug("Loading file", {"path": descriptor.full_path})
        return _read_file(descriptor)


class AsyncFileLoader(FileLoader):
    """
    Read files in a worker thread under a timeout.

    Attributes:
        timeout: Load budget in milliseconds
    """

    def __init__(self, timeout: int, logger: Optional[MetadataLogger] = None) -> None:
        super().__init__(logger)
        self.timeout = timeout

    def supports(self, descriptor: Any) -> bool:
        return self.timeout > 0 and super().supports(descriptor)

    def load(self, descriptor: FileDescriptor) -> Awaitable[FileObject]:
        return self._load(descriptor)

    async def _load(self, descriptor: FileDescriptor) -> FileObject:
        """
        Race the read against the timeout.

        Raises:
            LoadTimeoutError: The timeout elapsed before the read finished
            OSError: Any read failure, unmodified
        """
        seconds = self.timeout / 1000
        safe_logger(self.logger).log_debug(
            "Loading file", {"path": descriptor.full_path, "timeout": seconds}
        )
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(_read_file, descriptor), timeout=seconds
            )
        except asyncio.TimeoutError as e:
            raise LoadTimeoutError(seconds) from e


def create_file_loader(
    options: GenerateOptions, logger: Optional[MetadataLogger] = None
) -> FileLoader:
    """Select the loading strategy for a run."""
    if options.use_async:
        return AsyncFileLoader(options.timeout, logger=logger)
    return SyncFileLoader(logger=logger)
