#!/usr/bin/env python3
"""
context_factories.py
-------------------
Decide which files the next content stage loads.

Each factory answers "which file(s) of kind K should be loaded now?" from
the options and whatever the run context already holds, and returns file
descriptors for them. A factory that cannot name a path probes
``EMPTY_PATH`` and yields nothing.

Factories:
    ComprehensiveContextFactory: the persisted summary
    MarkdownContextFactory: every new post source
    PageContextFactory: the continuation page
    PostContextFactory: the continuation post
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from abc import ABC, abstractmethod
from typing import List, Optional

# --- Local imports ---
from blogmeta.core.logging_manager import MetadataLogger, safe_logger
from blogmeta.dataclasses import FileReference
from blogmeta.loaders.probe import (
    EMPTY_PATH,
    DirectoryProbe,
    FileDescriptor,
    FileProbe,
    PathContext,
)
from blogmeta.pipeline.context import RunContext


class ContextFactory(ABC):
    """Base class for descriptor factories."""

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        self.logger = logger
        self.file_probe = FileProbe(logger=logger)

    @abstractmethod
    def create(self, context: RunContext) -> List[FileDescriptor]:
        """Return descriptors of the files to load."""
        pass

    def _describe(self, path_context: PathContext) -> List[FileDescriptor]:
        if not self.file_probe.supports(path_context):
            if not path_context.is_empty:
                safe_logger(self.logger).log_debug(
                    "Nothing to load", {"factory": type(self).__name__, "path": path_context.path}
                )
            return []
        return [self.file_probe.load(path_context)]


class ComprehensiveContextFactory(ContextFactory):
    """Point at ``<comprehensive_load_path>/<comprehensive_load_file_name>``."""

    def create(self, context: RunContext) -> List[FileDescriptor]:
        options = context.options
        path = options.resolve(
            os.path.join(options.comprehensive_load_path, options.comprehensive_load_file_name)
        )
        return self._describe(PathContext(path))


class _ContinuationContextFactory(ContextFactory):
    def _reference(self, context: RunContext) -> Optional[FileReference]:
        raise NotImplementedError

    def create(self, context: RunContext) -> List[FileDescriptor]:
        reference = self._reference(context) if context.comprehensive is not None else None
        if reference is None or not reference.file_name:
            return self._describe(EMPTY_PATH)
        return self._describe(PathContext(context.options.resolve(reference.full_path)))


class PageContextFactory(_ContinuationContextFactory):
    """Point at the summary's latest page."""

    def _reference(self, context: RunContext) -> Optional[FileReference]:
        return context.comprehensive.latest_page


class PostContextFactory(_ContinuationContextFactory):
    """Point at the summary's latest post."""

    def _reference(self, context: RunContext) -> Optional[FileReference]:
        return context.comprehensive.latest_post


class MarkdownContextFactory(ContextFactory):
    """List post sources: files in ``post_load_path`` ending with the load extension."""

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        super().__init__(logger)
        self.directory_probe = DirectoryProbe(logger=logger)

    def create(self, context: RunContext) -> List[FileDescriptor]:
        options = context.options
        directory = PathContext(options.resolve(options.post_load_path))
        if not self.directory_probe.supports(directory):
            safe_logger(self.logger).log_warning(
                "Post directory not found", {"path": directory.path}
            )
            return []

        listing = self.directory_probe.load(directory)
        descriptors: List[FileDescriptor] = []
        for name in listing.file_names:
            if not name.endswith(options.post_load_extension):
                continue
            descriptors.extend(self._describe(PathContext(os.path.join(listing.path, name))))

        safe_logger(self.logger).log_info(
            "Found post sources", {"path": listing.path, "count": len(descriptors)}
        )
        return descriptors


def pre_context_factories(logger: Optional[MetadataLogger] = None) -> List[ContextFactory]:
    """Factories run before anything is loaded."""
    return [
        ComprehensiveContextFactory(logger=logger),
        MarkdownContextFactory(logger=logger),
        PageContextFactory(logger=logger),
    ]


def post_context_factories(logger: Optional[MetadataLogger] = None) -> List[ContextFactory]:
    """Factories run once the summary is known."""
    return [
        PageContextFactory(logger=logger),
        PostContextFactory(logger=logger),
    ]
