#!/usr/bin/env python3
"""
generators.py
-------------------
Fold the posts discovered by a run into the persistent index.

Generators run in the order post, page, comprehensive; the summary step
reads the pages the page step opens. New posts are ordered most recent
first (by parsed ``write_date_time``, ties by source file name) before any
generator sees them.

Classes:
    PostContentGenerator: Link posts into a doubly linked chain
    PageContentGenerator: Distribute posts into pages of PAGE_CAPACITY
    ComprehensiveContentGenerator: Update counters, categories and latest pointers
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from typing import List, Optional

# --- Local imports ---
from blogmeta.core.logging_manager import MetadataLogger, safe_logger
from blogmeta.dataclasses import Comprehensive, FileReference, Page, Post
from blogmeta.dataclasses.post import timestamp_sort_key
from blogmeta.pipeline.context import RunContext


def order_new_posts(posts: List[Post]) -> None:
    """Sort in place, most recent first; equal timestamps keep source-name order."""
    posts.sort(key=lambda post: post.original_file_name)
    posts.sort(key=lambda post: timestamp_sort_key(post.write_date_time), reverse=True)


class ContentGenerator(ABC):
    """Base class for index generators."""

    def __init__(self, logger: Optional[MetadataLogger] = None) -> None:
        self.logger = logger

    @abstractmethod
    def generate(self, context: RunContext) -> None:
        pass


class PostContentGenerator(ContentGenerator):
    """
    Chain new posts to each other and to the continuation post.

    With posts ordered most recent first, ``posts[i].previous_post`` is
    ``posts[i + 1]`` and ``posts[i + 1].next_post`` is ``posts[i]``. The
    continuation post's ``next_post`` becomes the oldest new post, and its
    stale record at the head of the continuation page is replaced.
    """

    def generate(self, context: RunContext) -> None:
        posts = context.posts
        if not posts:
            return

        continuation = context.post
        if continuation is not None:
            oldest = posts[-1]
            continuation.next_post = FileReference.of(oldest)
            oldest.previous_post = FileReference.of(continuation)

            page = context.page
            if page is not None and page.posts and page.posts[0].file_name == continuation.file_name:
                if continuation.previous_post is None:
                    continuation.previous_post = page.posts[0].previous_post
                page.posts[0] = continuation

        for newer, older in zip(posts, posts[1:]):
            newer.previous_post = FileReference.of(older)
            older.next_post = FileReference.of(newer)

        safe_logger(self.logger).log_debug("Linked posts", {"count": len(posts)})


class PageContentGenerator(ContentGenerator):
    """
    Distribute new posts into pages, oldest post first.

    A continuation page holding fewer than two posts is topped up before any
    page is opened. Every other post goes to fresh pages; a page is closed
    when it holds PAGE_CAPACITY posts and the next one is linked to it both
    ways. The continuation page links to the first fresh page.
    """

    def generate(self, context: RunContext) -> None:
        posts = context.posts
        if not posts:
            return

        options = context.options
        folder_path = options.relative(options.resolve(options.page_generate_path))
        index = len(posts) - 1

        continuation = context.page
        if continuation is not None and continuation.post_count < 2:
            while index >= 0 and not continuation.is_full:
                continuation.add_post(posts[index])
                index -= 1

        if index < 0:
            return

        page = Page.with_default(folder_path)
        if continuation is not None:
            continuation.link_next(page)

        while index >= 0:
            if page.is_full:
                next_page = Page.with_default(folder_path)
                page.link_next(next_page)
                context.pages.insert(0, page)
                page = next_page
            page.add_post(posts[index])
            index -= 1

        if not context.pages or context.pages[0] is not page:
            context.pages.insert(0, page)

        safe_logger(self.logger).log_debug(
            "Paged posts", {"pages": len(context.pages), "posts": len(posts)}
        )


class ComprehensiveContentGenerator(ContentGenerator):
    """Fold the run's posts and pages into the summary."""

    def generate(self, context: RunContext) -> None:
        if context.comprehensive is None:
            safe_logger(self.logger).log_info("No summary loaded, starting a new one")
            context.comprehensive = Comprehensive.with_default()
        comprehensive = context.comprehensive

        posts = context.posts
        if posts:
            newest = posts[0]
            comprehensive.update_latest_post(FileReference.of(newest), newest.categories)
            comprehensive.post_count += len(posts)
            for post in reversed(posts):
                reference = FileReference.of(post)
                for name in post.categories:
                    comprehensive.put_category(name, reference)

        pages = context.pages
        if pages:
            comprehensive.update_latest_page(FileReference.of(pages[0]))
            comprehensive.page_count += len(pages)
            for page in reversed(pages):
                comprehensive.add_page(FileReference.of(page))


def default_content_generators(
    logger: Optional[MetadataLogger] = None,
) -> List[ContentGenerator]:
    return [
        PostContentGenerator(logger=logger),
        PageContentGenerator(logger=logger),
        ComprehensiveContentGenerator(logger=logger),
    ]
