#!/usr/bin/env python3
"""
processors.py
-------------------
Install classified entities into the run context.

Processors are registered in the order comprehensive, page, post and each
handles only entities of its ``kind``.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Optional

# --- Local imports ---
from blogmeta.core.logging_manager import MetadataLogger, safe_logger
from blogmeta.dataclasses import Comprehensive, EntityKind, Page, Post
from blogmeta.loaders.probe import FileDescriptor
from blogmeta.pipeline.context import RunContext
from blogmeta.utils.fs import file_stem
from blogmeta.utils.identifiers import is_identifier, new_identifier


class PostProcessor(ABC):
    """Base class for entity post-processors."""

    kind: ClassVar[EntityKind]

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        self.logger = logger

    def supports(self, entity: Any) -> bool:
        return getattr(entity, "kind", None) is self.kind

    @abstractmethod
    def process(self, entity: Any, context: RunContext, descriptor: FileDescriptor) -> None:
        pass


class ComprehensivePostProcessor(PostProcessor):
    kind = EntityKind.COMPREHENSIVE

    def process(
        self, entity: Comprehensive, context: RunContext, descriptor: FileDescriptor
    ) -> None:
        context.comprehensive = entity
        safe_logger(self.logger).log_info(
            "Loaded comprehensive summary",
            {"path": descriptor.full_path, "posts": entity.post_count, "pages": entity.page_count},
        )


class PagePostProcessor(PostProcessor):
    """Stamp the page's location from where it was found; it continues the chain."""

    kind = EntityKind.PAGE

    def process(self, entity: Page, context: RunContext, descriptor: FileDescriptor) -> None:
        entity.file_name = descriptor.name
        entity.folder_path = context.options.relative(descriptor.directory_path)
        context.page = entity
        safe_logger(self.logger).log_info(
            "Loaded continuation page", {"path": descriptor.full_path, "posts": entity.post_count}
        )


class PostPostProcessor(PostProcessor):
    """
    Name posts.

    A post whose file name is already an identifier was published by an
    earlier run and is the continuation post. Any other post is new: it gets
    a fresh identifier under ``post_generate_path``, keeping its extension.
    """

    kind = EntityKind.POST

    def process(self, entity: Post, context: RunContext, descriptor: FileDescriptor) -> None:
        options = context.options
        entity.original_file_name = descriptor.name

        if is_identifier(file_stem(descriptor.name)):
            entity.file_name = descriptor.name
            entity.folder_path = options.relative(descriptor.directory_path)
            context.post = entity
            safe_logger(self.logger).log_info(
                "Loaded continuation post", {"path": descriptor.full_path}
            )
            return

        entity.file_name = f"{new_identifier()}{descriptor.extension}"
        entity.folder_path = options.relative(options.resolve(options.post_generate_path))
        context.posts.append(entity)
        safe_logger(self.logger).log_debug(
            "New post",
            {"source": descriptor.name, "published": entity.file_name, "title": entity.title},
        )


def default_post_processors(logger: Optional[MetadataLogger] = None) -> List[PostProcessor]:
    return [
        ComprehensivePostProcessor(logger=logger),
        PagePostProcessor(logger=logger),
        PostPostProcessor(logger=logger),
    ]
