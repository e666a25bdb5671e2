#!/usr/bin/env python3
"""
file_generators.py
-------------------
Persist the index: comprehensive summary, pages, published post copies.

Missing directories are created. Writes are not transactional: a failure
part-way leaves the files written so far in place, and the error
propagates.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from abc import ABC, abstractmethod
from typing import List, Optional

# --- Local imports ---
from blogmeta.core.logging_manager import MetadataLogger, safe_logger
from blogmeta.pipeline.context import RunContext
from blogmeta.serialize import ComprehensiveSerializer, PageSerializer
from blogmeta.utils.fs import copy_file, write_text


class FileGenerator(ABC):
    """Base class for output writers."""

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        self.logger = logger

    @abstractmethod
    def generate(self, context: RunContext) -> int:
        """Write files; return how many were written."""
        pass


class ComprehensiveFileGenerator(FileGenerator):
    """Write ``<comprehensive_generate_path>/<comprehensive_generate_file_name>``."""

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        super().__init__(logger)
        self.serializer = ComprehensiveSerializer()

    def generate(self, context: RunContext) -> int:
        options = context.options
        path = options.resolve(
            os.path.join(
                options.comprehensive_generate_path, options.comprehensive_generate_file_name
            )
        )
        write_text(path, self.serializer.serialize(context.comprehensive))
        safe_logger(self.logger).log_operation("comprehensive_written", {"path": path})
        return 1


class PageFileGenerator(FileGenerator):
    """
    Write the run's pages and the continuation page into ``page_generate_path``.

    Nothing is written when the run found no new posts.
    """

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        super().__init__(logger)
        self.serializer = PageSerializer()

    def generate(self, context: RunContext) -> int:
        if not context.posts:
            return 0

        options = context.options
        pages = list(context.pages)
        if context.page is not None:
            pages.append(context.page)

        for page in pages:
            path = options.resolve(os.path.join(options.page_generate_path, page.file_name))
            write_text(path, self.serializer.serialize(page))
            safe_logger(self.logger).log_debug(
                "Page written", {"path": path, "posts": page.post_count}
            )
        safe_logger(self.logger).log_operation("pages_written", {"count": len(pages)})
        return len(pages)


class PostFileGenerator(FileGenerator):
    """Copy each new post's source to its published name."""

    def generate(self, context: RunContext) -> int:
        options = context.options
        for post in context.posts:
            source = options.resolve(os.path.join(options.post_load_path, post.original_file_name))
            destination = options.resolve(os.path.join(options.post_generate_path, post.file_name))
            copy_file(source, destination)
            safe_logger(self.logger).log_debug(
                "Post published", {"source": source, "destination": destination}
            )
        if context.posts:
            safe_logger(self.logger).log_operation(
                "posts_written", {"count": len(context.posts)}
            )
        return len(context.posts)


def default_file_generators(logger: Optional[MetadataLogger] = None) -> List[FileGenerator]:
    return [
        ComprehensiveFileGenerator(logger=logger),
        PageFileGenerator(logger=logger),
        PostFileGenerator(logger=logger),
    ]
